import logging

import pytest
import yaml

from takeaway import main as main_module
from takeaway.constant import DONE_OPTION, NEW_ORDER_CHOICE
from takeaway.main import configure_logging


@pytest.fixture(autouse=True)
def _isolate(monkeypatch, tmp_path):
    monkeypatch.setattr(main_module, "ORDER_DIR", str(tmp_path))
    monkeypatch.setattr(main_module, "configure_logging", lambda: None)


def test_main_success_prints_path(monkeypatch, scripted_chooser, tmp_path, capsys):
    chooser = scripted_chooser([NEW_ORDER_CHOICE, "Pizza", "Olives", DONE_OPTION])
    monkeypatch.setattr(main_module, "TextualChooser", lambda: chooser)

    main_module.main()

    out = capsys.readouterr().out
    assert "Successfully wrote down order at" in out
    assert "Your order is done." in out
    saved = list(tmp_path.glob("order*.yml"))
    assert len(saved) == 1
    assert yaml.safe_load(saved[0].read_text()) == {"main_dish": "Pizza", "toppings": ["Olives"]}


def test_main_failure_exits_non_zero(monkeypatch, scripted_chooser, capsys):
    chooser = scripted_chooser([scripted_chooser.ABORT])
    monkeypatch.setattr(main_module, "TextualChooser", lambda: chooser)

    with pytest.raises(SystemExit) as excinfo:
        main_module.main()

    assert excinfo.value.code == 1
    assert "failed to get response" in capsys.readouterr().out


def test_configure_logging_writes_to_file(tmp_path):
    log_path = tmp_path / "logs" / "debug.log"
    package_logger = logging.getLogger("takeaway")
    previous = (list(package_logger.handlers), package_logger.level)
    try:
        configure_logging(str(log_path), "DEBUG")
        logging.getLogger("takeaway.workflow").debug("hello from test")
        for handler in package_logger.handlers:
            handler.flush()
        assert "hello from test" in log_path.read_text()
    finally:
        for handler in list(package_logger.handlers):
            package_logger.removeHandler(handler)
            handler.close()
        for handler in previous[0]:
            package_logger.addHandler(handler)
        package_logger.setLevel(previous[1])


def test_main_logging_failure_exits_non_zero(monkeypatch, capsys):
    def broken():
        raise PermissionError("log dir is read-only")

    monkeypatch.setattr(main_module, "configure_logging", broken)

    with pytest.raises(SystemExit) as excinfo:
        main_module.main()

    assert excinfo.value.code == 1
    assert "failed to set up logging" in capsys.readouterr().out
