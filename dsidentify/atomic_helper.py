# This file is part of ds-identify. See LICENSE file for license information.

import logging
import os
import tempfile
from contextlib import suppress

from dsidentify import util

_DEF_PERMS = 0o644
LOG = logging.getLogger(__name__)


def write_file(filename, content, mode=_DEF_PERMS, omode="wb"):
    """open filename in mode omode, write content, set permissions to mode

    The content lands in a temporary file beside ``filename`` which is then
    renamed over it, so readers never observe a partially written file.
    """
    if "b" in omode:
        content = util.encode_text(content)
    else:
        content = util.decode_binary(content)

    tf = None
    try:
        dirname = os.path.dirname(filename)
        util.ensure_dir(dirname)
        tf = tempfile.NamedTemporaryFile(dir=dirname, delete=False, mode=omode)
        LOG.debug(
            "Atomically writing to file %s (via temporary file %s) - %s: [%o]"
            " %d bytes/chars",
            filename,
            tf.name,
            omode,
            mode,
            len(content),
        )
        tf.write(content)
        tf.close()
        os.chmod(tf.name, mode)
        os.rename(tf.name, filename)
    except Exception as e:
        if tf is not None:
            # The first error is the one to report.
            with suppress(OSError):
                tf.close()
            with suppress(OSError):
                os.unlink(tf.name)
        raise e
