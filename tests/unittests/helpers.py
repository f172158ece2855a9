# This file is part of ds-identify. See LICENSE file for license information.

import os

from dsidentify import util


def populate_dir(path, files):
    if not os.path.exists(path):
        os.makedirs(path)
    ret = []
    for (name, content) in files.items():
        p = os.path.sep.join([str(path), name])
        util.ensure_dir(os.path.dirname(p))
        with open(p, "wb") as fp:
            if isinstance(content, bytes):
                fp.write(content)
            else:
                fp.write(content.encode("utf-8"))
            fp.close()
        ret.append(p)

    return ret


def load_text_file(fname):
    return util.decode_binary(util.load_binary_file(fname))


def dir2dict(startdir, prefix=None):
    flist = {}
    if prefix is None:
        prefix = str(startdir)
    for root, _dirs, files in os.walk(startdir):
        for fname in files:
            fpath = os.path.join(root, fname)
            key = fpath[len(prefix) :]
            flist[key] = load_text_file(fpath)
    return flist
