from __future__ import annotations

import json
import logging

import pytest

from bionic.domain.models import QualifiedLead
from bionic.infra.qualification_log import LoggingQualificationRecorder
from bionic.observability.logging import RequestContextFilter, log_workflow_failure
from bionic.observability.timing import timed


def test_qualification_recorder_emits_discoverable_record(caplog):
    recorder = LoggingQualificationRecorder()

    with caplog.at_level("INFO"):
        recorder.record(QualifiedLead(name="Jane Doe", budget="$3M"))

    recs = [r for r in caplog.records if r.message == "leads_collection_update"]
    assert len(recs) == 1
    assert recs[0].lead_name == "Jane Doe"
    assert recs[0].lead_budget == "$3M"
    assert recs[0].lead_status == "qualified"
    assert recs[0].collection == "leads"


def test_log_workflow_failure(caplog):
    logger = logging.getLogger("bionic.test")

    with caplog.at_level("WARNING"):
        log_workflow_failure(logger, "propensity", reason="transport", error_type="APIError")

    rec = caplog.records[-1]
    assert rec.message == "workflow_failed"
    assert rec.workflow == "propensity"
    assert rec.reason == "transport"
    assert rec.workflow_failed is True


def test_timed_logs_latency_and_outcome(caplog):
    with caplog.at_level("INFO"):
        with timed("unit", model="gpt-test"):
            pass
        with pytest.raises(RuntimeError):
            with timed("unit"):
                raise RuntimeError("boom")

    recs = [r for r in caplog.records if r.message == "model_call_latency"]
    assert [r.outcome for r in recs[-2:]] == ["ok", "error"]
    assert recs[-2].model == "gpt-test"
    assert recs[-2].elapsed_ms >= 0


def test_context_filter_sets_service_and_preserves_explicit_id():
    record = logging.LogRecord("x", logging.INFO, __file__, 1, "msg", None, None)
    record.correlation_id = "cid-1"

    assert RequestContextFilter("bionic").filter(record) is True
    assert record.correlation_id == "cid-1"
    assert record.service == "bionic"
    assert record.workspace == ""


def test_json_formatter_output(capsys):
    from bionic.observability.logging import configure_logging

    root = logging.getLogger()
    previous_handlers, previous_level = root.handlers[:], root.level
    try:
        configure_logging("INFO", "bionic")
        logging.getLogger("bionic.json").info("hello", extra={"lead_status": "qualified"})
        line = capsys.readouterr().err.strip().splitlines()[-1]
    finally:
        root.handlers = previous_handlers
        root.setLevel(previous_level)

    payload = json.loads(line)
    assert payload["message"] == "hello"
    assert payload["level"] == "INFO"
    assert payload["service"] == "bionic"
    assert payload["lead_status"] == "qualified"
