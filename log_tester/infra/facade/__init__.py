from log_tester.infra.facade.stdlib import RecordingHandler, find_handler, install

__all__ = ["RecordingHandler", "find_handler", "install"]
