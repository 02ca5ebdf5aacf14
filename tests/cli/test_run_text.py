"""Tests for the command-line runner and entry point."""

import io
import logging

import pytest

from textpipe.cli.main import main
from textpipe.cli.run_text import (
    build_config,
    load_user_config_dict,
    run_text_pipeline,
    setup_logging,
)
from textpipe.contracts import ContractViolation
from textpipe.pipeline import operations


class TestLoadUserConfig:

    def test_loads_config_dict(self, user_config_file):
        path = user_config_file("""
            CONFIG = {"OPERATION": "to_lowercase"}
        """)
        assert load_user_config_dict(str(path)) == {"OPERATION": "to_lowercase"}

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_user_config_dict(str(tmp_path / "nope.py"))

    def test_no_config_dict(self, user_config_file):
        path = user_config_file("SETTINGS = {}\n")
        with pytest.raises(ValueError, match="No CONFIG dict"):
            load_user_config_dict(str(path))


class TestBuildConfig:

    def test_defaults_without_file(self):
        config = build_config()
        assert config.operation == "collapse_whitespace"

    def test_file_then_cli_precedence(self, user_config_file):
        path = user_config_file("""
            CONFIG = {"OPERATION": "to_lowercase", "LOG_LEVEL": "ERROR"}
        """)
        config = build_config(str(path), cli_args={"operation": "remove_empty_lines"})
        assert config.operation == "remove_empty_lines"
        assert config.logging.level == "ERROR"

    def test_none_cli_values_ignored(self, user_config_file):
        path = user_config_file("""
            CONFIG = {"OPERATION": "to_lowercase"}
        """)
        config = build_config(str(path), cli_args={"operation": None})
        assert config.operation == "to_lowercase"

    def test_verbose_enables_debug(self):
        assert build_config(verbose=True).logging.level == "DEBUG"


class TestSetupLogging:

    def test_replaces_root_handlers(self, internal_config):
        stream = io.StringIO()
        setup_logging(internal_config, stream=stream)

        root = logging.getLogger()
        assert len(root.handlers) == 1
        assert root.level == logging.INFO

        logging.getLogger("textpipe.test").info("hello from test")
        assert "textpipe.test - INFO - hello from test" in stream.getvalue()


class TestRunTextPipeline:

    def test_success_writes_result_only(self, make_config):
        config = make_config(OPERATION="remove_empty_lines", SHOW_INDICATORS=False)
        out, err = io.StringIO(), io.StringIO()

        code = run_text_pipeline("line1\n\nline2", config, stdout=out, stderr=err)

        assert code == 0
        assert out.getvalue() == "line1\r\nline2"
        assert err.getvalue() == ""

    def test_indicators_on_stderr(self, internal_config):
        out, err = io.StringIO(), io.StringIO()

        run_text_pipeline("  a  b ", internal_config, stdout=out, stderr=err)

        assert out.getvalue() == "a b"
        assert "pre:  green" in err.getvalue()
        assert "post: green" in err.getvalue()

    def test_precondition_failure(self, internal_config):
        out, err = io.StringIO(), io.StringIO()

        code = run_text_pipeline("\n\n\n", internal_config, stdout=out, stderr=err)

        assert code == 1
        assert out.getvalue() == ""
        assert "pre:  red" in err.getvalue()
        assert "InvalidArgumentError" in err.getvalue()

    def test_null_input(self, internal_config):
        err = io.StringIO()
        code = run_text_pipeline(None, internal_config, stdout=io.StringIO(), stderr=err)
        assert code == 1
        assert "NullInputError" in err.getvalue()

    def test_contract_violation_propagates(self, internal_config, monkeypatch):
        monkeypatch.setattr(operations, "is_collapsed", lambda text, result: False)
        with pytest.raises(ContractViolation):
            run_text_pipeline("x", internal_config, stdout=io.StringIO(), stderr=io.StringIO())


class TestMain:

    def test_text_argument(self, capsys):
        code = main(["-o", "to_lowercase", "Hello WORLD"])
        captured = capsys.readouterr()
        assert code == 0
        assert captured.out == "hello world"

    def test_reads_stdin(self, capsys, monkeypatch):
        monkeypatch.setattr("sys.stdin", io.StringIO("line1\r\n\r\nline2\n\nline3"))
        code = main(["-o", "remove_empty_lines"])
        assert code == 0
        assert capsys.readouterr().out == "line1\r\nline2\r\nline3"

    def test_blank_input_exit_code(self, capsys):
        assert main(["   "]) == 1
        assert "InvalidArgumentError" in capsys.readouterr().err

    def test_list(self, capsys):
        assert main(["--list"]) == 0
        out = capsys.readouterr().out
        for name in operations.OPERATIONS:
            assert name in out

    def test_contract(self, capsys):
        assert main(["--contract", "-o", "remove_empty_lines"]) == 0
        assert "OPERATION: Remove empty lines" in capsys.readouterr().out

    def test_config_file(self, capsys, user_config_file):
        path = user_config_file("""
            CONFIG = {"OPERATION": "to-lowercase", "SHOW_INDICATORS": False}
        """)
        assert main(["--config", str(path), "ABC"]) == 0
        captured = capsys.readouterr()
        assert captured.out == "abc"
        assert "pre:" not in captured.err

    def test_unknown_operation_rejected_by_parser(self):
        with pytest.raises(SystemExit):
            main(["-o", "reverse", "abc"])
