"""
Multi-threaded logger for gavloader.

Every line is emitted as a JSON document describing the caller, so that
log output from concurrent download workers can be correlated.
"""

import inspect
import logging
import threading
from datetime import datetime

from pydantic import BaseModel


class LogLine(BaseModel):
    """
    Represents a line in the gavloader log
    """

    time: str
    level: str
    thread: str
    caller_file: str
    caller_name: str
    caller_line: int
    message: str


class GavloaderLogger:
    """
    Logger class
    """

    def __init__(self, name: str = "gavloader") -> None:
        self.logger = logging.getLogger(name)
        self.logger.setLevel(logging.INFO)

    def log(self, debug_message: str, level: int) -> None:
        """
        Log the debug message using the logger
        """
        if not self.logger.isEnabledFor(level):
            return

        debug_message = debug_message.replace("'", '"').replace("\n", " ")

        # Collect details about the callee
        curframe = inspect.currentframe()
        calframe = inspect.getouterframes(curframe, 2)
        caller_file = calframe[1][1].split("/")[-1]
        caller_line = calframe[1][2]
        caller_name = calframe[1][3]

        debug_log_line = LogLine(
            time=str(datetime.now()),
            level=logging.getLevelName(level),
            thread=threading.current_thread().name,
            caller_file=caller_file,
            caller_name=caller_name,
            caller_line=caller_line,
            message=debug_message,
        ).model_dump_json()

        self.logger.log(
            level=level,
            msg=debug_log_line,
        )
