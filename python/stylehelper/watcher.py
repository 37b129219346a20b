# SPDX-License-Identifier: AGPL-3.0-only
import time
from pathlib import Path
from watchdog.observers import Observer
from watchdog.events import FileSystemEventHandler
from .cli import cmd_merge


class MergeEventHandler(FileSystemEventHandler):
    def __init__(self, args, delay=0.5):
        self.args = args
        self.delay = delay
        self.last_build = 0
        self.watched = {Path(p).resolve() for p in args.inputs if p != "-"}

    def on_modified(self, event):
        if event.is_directory:
            return

        # Only react to the merged input files
        if Path(event.src_path).resolve() not in self.watched:
            return

        # Debounce
        now = time.time()
        if now - self.last_build < self.delay:
            return

        print(f"[watch] Change detected in {event.src_path}...")
        try:
            cmd_merge(self.args)
        except Exception as e:
            print(f"[error] Merge failed: {e}")

        self.last_build = now


def cmd_watch(args):
    """Watch the input style files and re-merge on change."""
    if "-" in args.inputs:
        raise ValueError("watch cannot read from stdin")
    directories = sorted({Path(p).resolve().parent for p in args.inputs})

    print(f"[watch] Watching {len(args.inputs)} files for changes...")

    # Initial merge
    try:
        cmd_merge(args)
    except Exception as e:
        print(f"[error] Initial merge failed: {e}")

    event_handler = MergeEventHandler(args, delay=args.delay)
    observer = Observer()
    for directory in directories:
        observer.schedule(event_handler, str(directory), recursive=False)
    observer.start()

    try:
        while True:
            time.sleep(1)
    except KeyboardInterrupt:
        observer.stop()
    observer.join()
