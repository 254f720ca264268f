import json

import pytest

from bem_classnames.demo import main
from bem_classnames.utils.settings import NAMESPACE_ENV


@pytest.fixture(autouse=True)
def _no_namespace(tmp_path, monkeypatch):
    monkeypatch.delenv(NAMESPACE_ENV, raising=False)
    monkeypatch.setenv("DATA_DIR", str(tmp_path / "data"))


def test_smoke(capsys):
    main(["accordion", "header", "section", "--namespace", "tn-", "--modifier", "multiple"])
    out = json.loads(capsys.readouterr().out)
    assert out["classNames"] == {
        "default": "tn-accordion",
        "header": "tn-accordion-header",
        "section": "tn-accordion-section",
    }
    assert out["className"] == "tn-accordion tn-accordion--multiple"


def test_smoke_defaults(capsys):
    main([])
    out = json.loads(capsys.readouterr().out)
    assert out["classNames"]["header"] == "accordion-header"
    assert out["className"] == "accordion"


def test_smoke_custom_block_has_no_default_elements(capsys):
    main(["progress"])
    out = json.loads(capsys.readouterr().out)
    assert out["classNames"] == {"default": "progress"}
    assert out["className"] == "progress"
