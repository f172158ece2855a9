# This file is part of ds-identify. See LICENSE file for license information.

import logging
import os

import pytest
import yaml

from dsidentify import util

LOG = logging.getLogger(__name__)


class TestLoadYaml:
    mydefault = "7b03a8ebace993d806255121073fed52"

    def test_simple(self):
        mydata = {"1": "one", "2": "two"}
        assert util.load_yaml(blob=yaml.dump(mydata)) == mydata

    def test_unquoted_keys_stay_ints(self):
        assert {1: "one", 2: "two"} == util.load_yaml(b"1: one\n2: two\n")

    def test_nonallowed_returns_default(self, caplog):
        """Any unallowed types result in returning default; log the issue."""
        # for now, anything not in the allowed list just returns the default.
        myyaml = "- Ec2\n- GCE\n"
        assert util.load_yaml(blob=myyaml, default=self.mydefault) == (
            self.mydefault
        )
        assert (
            "Yaml load allows (<class 'dict'>,) root types, but got list"
            " instead" in caplog.text
        )

    def test_bogus_scan_error_returns_default(self, caplog):
        """On Yaml scan error, load_yaml returns the default and logs issue."""
        badyaml = "1\n 2:"
        assert util.load_yaml(blob=badyaml, default=self.mydefault) == (
            self.mydefault
        )
        assert (
            "Failed loading yaml blob. Invalid format at line 2 column 3:"
            ' "mapping values are not allowed here' in caplog.text
        )

    def test_bogus_parse_error_returns_default(self, caplog):
        """On Yaml parse error, load_yaml returns default and logs issue."""
        badyaml = "{}}"
        assert util.load_yaml(blob=badyaml, default=self.mydefault) == (
            self.mydefault
        )
        assert (
            "Failed loading yaml blob. Invalid format at line 1 column 3:"
            " \"expected '<document start>', but found '}'" in caplog.text
        )

    def test_undecodable_returns_default(self):
        assert util.load_yaml(b"\xff\xfe:", default=self.mydefault) == (
            self.mydefault
        )

    @pytest.mark.parametrize("blob", ("", " ", "# foo\n", "#"))
    def test_none_returns_default(self, blob):
        """If yaml.load returns None, then default should be returned."""
        assert util.load_yaml(blob=blob, default=self.mydefault) == (
            self.mydefault
        )


class TestLoadBinaryFile:
    def test_reads_bytes(self, tmp_path):
        path = tmp_path / "product_name"
        path.write_bytes(b"Exoscale\n")
        assert b"Exoscale\n" == util.load_binary_file(path)

    def test_missing_raises(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            util.load_binary_file(tmp_path / "missing")


class TestEnsureDir:
    def test_creates_parents(self, tmp_path):
        path = str(tmp_path / "run" / "cloud-init")
        util.ensure_dir(path)
        assert os.path.isdir(path)

    def test_existing_dir(self, tmp_path):
        util.ensure_dir(str(tmp_path))
        assert os.path.isdir(str(tmp_path))

    def test_file_in_the_way(self, tmp_path):
        (tmp_path / "run").write_text("")
        with pytest.raises(FileExistsError):
            util.ensure_dir(str(tmp_path / "run"))


class TestError:
    def test_returns_rc(self, capsys):
        assert 1 == util.error("it broke")
        assert "Error:\nit broke\n" == capsys.readouterr().err

    def test_custom_rc_and_fmt(self, capsys):
        assert 3 == util.error("it broke", rc=3, fmt="E: {}")
        assert "E: it broke\n" == capsys.readouterr().err


class TestLogexc:
    def test_logs_at_level_and_traceback_at_debug(self, caplog):
        caplog.set_level(logging.DEBUG)
        try:
            raise RuntimeError("boom")
        except RuntimeError:
            util.logexc(LOG, "Failed writing %s", "cloud.cfg")
        levels = [r.levelno for r in caplog.records]
        assert [logging.WARNING, logging.DEBUG] == levels
        assert "Failed writing cloud.cfg" == caplog.records[0].getMessage()
        assert caplog.records[1].exc_info is not None


class TestGetEnvInt:
    def test_unset(self, monkeypatch):
        monkeypatch.delenv("DEBUG_LEVEL", raising=False)
        assert 1 == util.get_env_int("DEBUG_LEVEL", 1)

    def test_set(self, monkeypatch):
        monkeypatch.setenv("DEBUG_LEVEL", "2")
        assert 2 == util.get_env_int("DEBUG_LEVEL", 1)

    def test_not_an_int(self, monkeypatch, caplog):
        monkeypatch.setenv("DEBUG_LEVEL", "loud")
        assert 1 == util.get_env_int("DEBUG_LEVEL", 1)
        assert "Ignoring non-integer DEBUG_LEVEL='loud'" in caplog.text
