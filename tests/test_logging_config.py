import json
import logging

from hvac_diagnosis.utils.logging_config import JsonFormatter, setup_logging


class TestSetupLogging:
    def test_text_format(self):
        setup_logging("DEBUG", "TEXT")
        package_logger = logging.getLogger("hvac_diagnosis")

        assert package_logger.level == logging.DEBUG
        assert not package_logger.propagate
        assert len(package_logger.handlers) == 1
        assert not isinstance(package_logger.handlers[0].formatter, JsonFormatter)

    def test_json_format(self):
        setup_logging("warning", "json")
        package_logger = logging.getLogger("hvac_diagnosis")

        assert package_logger.level == logging.WARNING
        assert isinstance(package_logger.handlers[0].formatter, JsonFormatter)


class TestJsonFormatter:
    def test_record_fields(self):
        record = logging.LogRecord(
            "hvac_diagnosis.core.pt_chart", logging.WARNING, __file__, 1, "알 수 없는 냉매 %s", ("R-Z",), None
        )
        data = json.loads(JsonFormatter().format(record))

        assert data["level"] == "WARNING"
        assert data["logger"] == "hvac_diagnosis.core.pt_chart"
        assert data["msg"] == "알 수 없는 냉매 R-Z"
