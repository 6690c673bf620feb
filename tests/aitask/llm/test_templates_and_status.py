import logging

import pytest

from aitask.llm.prompting import AIFunction
from aitask.llm.status import LogStatusReporter, Phase
from aitask.llm.templates import TEMPLATES, get_template, print_project_scope


def test_registry_holds_named_templates():
    assert set(TEMPLATES) == {
        "convert_user_input_to_goal",
        "print_project_scope",
        "print_site_urls",
        "print_backend_webserver_code",
        "print_rest_api_endpoints",
        "print_json_value",
    }
    for name, template in TEMPLATES.items():
        assert isinstance(template, AIFunction)
        assert template.name == name
        assert template.generate("x").startswith(f"def {name}(")


def test_get_template():
    assert get_template("print_project_scope") is print_project_scope
    with pytest.raises(KeyError, match="no_such_task"):
        get_template("no_such_task")


def test_project_scope_template_names_its_keys():
    text = print_project_scope.generate("a blog")
    assert "-> dict:" in text
    for key in ("is_crud_required", "is_user_login_and_logout", "is_external_urls_required"):
        assert key in text


def test_log_status_reporter_levels(caplog):
    reporter = LogStatusReporter(logging.getLogger("aitask.test_status"))

    with caplog.at_level(logging.INFO, logger="aitask.test_status"):
        reporter.report("Backend Developer", "Writing code", Phase.AI_CALL)
        reporter.report("Backend Developer", "Server crashed", Phase.ISSUE)

    assert [(r.levelno, r.getMessage()) for r in caplog.records] == [
        (logging.INFO, "Agent: Backend Developer: Writing code"),
        (logging.WARNING, "Agent: Backend Developer: Server crashed"),
    ]
