# Copyright (C) 2012 Canonical Ltd.
#
# This file is part of ds-identify. See LICENSE file for license information.

import yaml


class NoAliasSafeDumper(yaml.dumper.SafeDumper):
    """A class which avoids constructing anchors/aliases on yaml dump"""

    def ignore_aliases(self, data):
        return True


def dumps(obj) -> str:
    """Return data as a block style yaml document, keys sorted.

    The output only depends on ``obj`` so that rewriting an unchanged
    decision produces identical bytes.
    """
    return yaml.dump(
        obj,
        line_break="\n",
        indent=2,
        explicit_start=True,
        default_flow_style=False,
        sort_keys=True,
        Dumper=NoAliasSafeDumper,
    )
