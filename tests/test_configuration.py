"""Tests for configuration, messages, exceptions and logging."""

import io
import json
import logging

import pytest

from php_getters_setters.configuration import DEFAULTS, Configuration
from php_getters_setters.exceptions import (
    ConfigurationError,
    EditApplicationFailed,
    GettersSettersError,
    InsertionPointNotFound,
    MissingTemplate,
    NotApplicableDocument,
    PropertyNotFound,
)
from php_getters_setters.logging import JsonFormatter, setup_logging
from php_getters_setters.messages import Messenger, format_error, format_info


class TestConfiguration:
    """Tests for Configuration."""

    def test_defaults(self):
        config = Configuration()
        assert config.get_int("spacesAfterReturn") == 2
        assert config.get_int("spacesAfterParam") == 2
        assert config.get_int("spacesAfterParamVar") == 2
        assert config.redirect is True

    def test_flat_settings(self):
        config = Configuration({"spacesAfterReturn": 4, "redirect": False})
        assert config.spaces("spacesAfterReturn") == "    "
        assert config.redirect is False

    def test_sectioned_settings(self):
        config = Configuration({"phpGettersSetters": {"spacesAfterParam": 1}})
        assert config.get_int("spacesAfterParam") == 1

    def test_dotted_settings(self):
        config = Configuration({"phpGettersSetters.redirect": False, "editor.tabSize": 4})
        assert config.redirect is False

    def test_wrong_type_falls_back(self, caplog):
        config = Configuration({"spacesAfterReturn": "three", "redirect": "yes"})
        with caplog.at_level(logging.WARNING):
            assert config.get_int("spacesAfterReturn") == 2
            assert config.redirect is True
        assert "spacesAfterReturn" in caplog.text

    def test_bool_is_not_a_count(self):
        assert Configuration({"spacesAfterReturn": True}).get_int("spacesAfterReturn") == 2

    def test_explicit_default(self):
        assert Configuration().get_int("unknown", 7) == 7

    def test_settings_are_read_only(self):
        config = Configuration({"spacesAfterReturn": 1})
        with pytest.raises(TypeError):
            config._settings["spacesAfterReturn"] = 5

    def test_source_mapping_is_copied(self):
        settings = {"spacesAfterReturn": 1}
        config = Configuration(settings)
        settings["spacesAfterReturn"] = 9
        assert config.get_int("spacesAfterReturn") == 1

    def test_defaults_are_immutable(self):
        with pytest.raises(TypeError):
            DEFAULTS["redirect"] = False

    def test_from_file(self, tmp_path):
        path = tmp_path / "settings.json"
        path.write_text(json.dumps({"phpGettersSetters.spacesAfterParamVar": 1}))
        assert Configuration.from_file(path).get_int("spacesAfterParamVar") == 1

    def test_from_missing_file(self, tmp_path):
        with pytest.raises(ConfigurationError):
            Configuration.from_file(tmp_path / "missing.json")

    def test_from_invalid_file(self, tmp_path):
        path = tmp_path / "settings.json"
        path.write_text("[1, 2]")
        with pytest.raises(ConfigurationError):
            Configuration.from_file(path)


class TestMessages:
    """Tests for message formatting."""

    def test_error_prefix(self):
        assert format_error("Not a PHP file.") == "phpGettersSetters error: Not a PHP file."

    def test_info_prefix(self):
        assert format_info("Done") == "phpGettersSetters info: Done"

    def test_codicon_is_stripped(self):
        assert format_error("$(alert)  Something failed") == "phpGettersSetters error: Something failed"

    def test_messenger_uses_host(self, host):
        messenger = Messenger(host)
        messenger.error("bad")
        messenger.info("good")
        assert host.errors == ["phpGettersSetters error: bad"]
        assert host.infos == ["phpGettersSetters info: good"]


class TestExceptionHierarchy:
    """Test exception inheritance chain."""

    @pytest.mark.parametrize("error", [
        NotApplicableDocument,
        PropertyNotFound,
        MissingTemplate,
        InsertionPointNotFound,
        EditApplicationFailed,
        ConfigurationError,
    ])
    def test_is_getters_setters_error(self, error):
        assert isinstance(error("test"), GettersSettersError)

    def test_exception_message(self):
        assert str(PropertyNotFound("No property found.")) == "No property found."


class TestLogging:
    """Tests for logging setup."""

    def test_setup_logging_level(self):
        setup_logging("DEBUG")
        assert logging.getLogger("php_getters_setters").level == logging.DEBUG
        setup_logging("WARNING")

    def test_unknown_level_falls_back_to_warning(self):
        setup_logging("chatty")
        assert logging.getLogger().level == logging.WARNING

    def test_single_handler_on_given_stream(self):
        stream = io.StringIO()
        setup_logging("INFO", stream=stream)
        setup_logging("INFO", stream=stream)
        assert len(logging.getLogger().handlers) == 1

        logging.getLogger("php_getters_setters.resolver").info("inserted %d lines", 3)
        assert "INFO [php_getters_setters.resolver] inserted 3 lines" in stream.getvalue()

    def test_protocol_logger_is_quieted(self):
        setup_logging("DEBUG")
        assert logging.getLogger("pygls").level == logging.WARNING
        setup_logging("WARNING")

    def test_json_output(self):
        stream = io.StringIO()
        setup_logging("INFO", "json", stream=stream)
        logging.getLogger("php_getters_setters").info("hello")
        data = json.loads(stream.getvalue())
        assert data["logger"] == "php_getters_setters"
        assert data["message"] == "hello"

    def test_json_formatter(self):
        record = logging.LogRecord("php_getters_setters", logging.INFO, __file__, 1, "hello %s", ("world",), None)
        data = json.loads(JsonFormatter().format(record))
        assert data["message"] == "hello world"
        assert data["level"] == "INFO"
