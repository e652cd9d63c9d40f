import logging

from consign_tracker.lib import logs


def test_logger_from_file_path_is_package_child() -> None:
    log = logs.logger("/srv/app/consign_tracker/state.py")

    assert log.name == "consign_tracker.state"
    assert log.parent is logging.getLogger(logs.ROOT_LOGGER)


def test_root_handler_attached_once() -> None:
    logs.logger("first")
    logs.logger("second")

    assert len(logging.getLogger(logs.ROOT_LOGGER).handlers) == 1
