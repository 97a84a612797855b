from __future__ import annotations
import argparse
import json
import logging
import signal
import sys
from typing import List, Optional, TextIO

from PySide6.QtCore import QCoreApplication, QObject, Slot

from . import __version__
from .categories import group_by_category
from .drives import volume_usage
from .log import get_logger, setup_logging
from .models import ScanProgress, ScanResult
from .utils import format_bytes, format_percent
from .worker import ScanThread

log = get_logger("cli")

def render_report(result: ScanResult, by_category: bool = False, top: int = 0,
                  out: Optional[TextIO] = None) -> None:
    out = out or sys.stdout
    vol = volume_usage(result.root) if result.root else None
    if vol:
        out.write(f"{result.root}  (volume: {format_bytes(vol['used'])} used of "
                  f"{format_bytes(vol['total'])}, {vol['percent']:.1f}%)\n")
    elif result.root:
        out.write(f"{result.root}\n")

    if by_category:
        rows = [(g.total_bytes, g.category, f"{len(g.folders)} folder(s)")
                for g in group_by_category(result.folders)]
    else:
        rows = [(f.size_bytes, f.category, f.name) for f in result.folders]
    if top > 0:
        rows = rows[:top]

    for size, category, label in rows:
        out.write(f" {format_bytes(size):>10}  {category:<30} {label}\n")
    out.write("  -----\n")
    out.write(f" {format_bytes(result.total_size_bytes):>10}  TOTAL ({result.total_size_bytes})"
              f" in {result.elapsed_sec:.2f}s\n")

class Reporter(QObject):
    """Receives ScanThread signals on the main thread."""

    def __init__(self, args, out: Optional[TextIO] = None, err: Optional[TextIO] = None):
        super().__init__()
        self.args = args
        self.out = out or sys.stdout
        self.err = err or sys.stderr

    @Slot(str, object)
    def on_progress(self, event: str, progress: ScanProgress):
        if self.args.quiet:
            return
        self.err.write(f"\r[{format_percent(progress.percent)}] "
                       f"{progress.scanned_folders}/{progress.total_folders} "
                       f"{progress.current_folder:<40.40}")
        if progress.scanned_folders == progress.total_folders:
            self.err.write("\n")
        self.err.flush()

    @Slot(object)
    def on_done(self, result: ScanResult):
        if self.args.json:
            json.dump(result.to_dict(), self.out, indent=2)
            self.out.write("\n")
        else:
            render_report(result, by_category=self.args.by_category, top=self.args.top, out=self.out)
        QCoreApplication.exit(0)

    @Slot(str)
    def on_error(self, msg: str):
        self.err.write(f"sunder: {msg}\n")
        QCoreApplication.exit(1)

def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="sunder",
        description="Show which top-level folders of your home directory use the most space.")
    p.add_argument("--root", help="directory to scan instead of the home directory")
    p.add_argument("--json", action="store_true", help="print the result as JSON")
    p.add_argument("--by-category", action="store_true", help="summarize per category")
    p.add_argument("--top", type=int, default=0, metavar="N", help="show only the N largest rows")
    p.add_argument("-q", "--quiet", action="store_true", help="no progress output")
    p.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return p

def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(logging.DEBUG if args.verbose else logging.WARNING)

    app = QCoreApplication.instance() or QCoreApplication([sys.argv[0]])
    signal.signal(signal.SIGINT, signal.SIG_DFL)

    reporter = Reporter(args)
    thread = ScanThread(args.root)
    thread.progress.connect(reporter.on_progress)
    thread.done.connect(reporter.on_done)
    thread.error.connect(reporter.on_error)

    log.debug("starting scan of %s", args.root or "home directory")
    thread.start()
    code = app.exec()
    thread.wait()
    return code

if __name__ == "__main__":
    sys.exit(main())
