from __future__ import annotations
from typing import Optional

from PySide6.QtCore import QThread, Signal

from .log import get_logger
from .models import ScanProgress
from .scanner import ScanError, run_smart_scan, smart_scan

log = get_logger("worker")

class CancelFlag:
    def __init__(self):
        self._cancel = False

    def cancel(self):
        self._cancel = True

    def __call__(self):
        return self._cancel

class ScanThread(QThread):
    progress = Signal(str, object)  # event name, ScanProgress
    done = Signal(object)           # ScanResult
    error = Signal(str)

    def __init__(self, root: Optional[str] = None):
        super().__init__()
        self.root = root  # None: the user's home directory
        self.cancel_flag = CancelFlag()

    def cancel(self):
        self.cancel_flag.cancel()

    def _emit(self, event: str, payload: ScanProgress):
        self.progress.emit(event, payload)

    def run(self):
        try:
            if self.root is None:
                res = smart_scan(emit=self._emit, cancel_flag=self.cancel_flag)
            else:
                res = run_smart_scan(self.root, emit=self._emit, cancel_flag=self.cancel_flag)
        except ScanError as e:
            self.error.emit(str(e))
        except Exception as e:
            log.exception("scan worker crashed")
            self.error.emit(f"Scan worker failed: {e}")
        else:
            self.done.emit(res)
