#!/usr/bin/env python3
import os
import signal
from pathlib import Path


def stop_server():
    pid_file = Path(__file__).parent / "dev-toolbox.pid"

    if not pid_file.exists():
        print("❌ Server is not running (no PID file found)")
        return

    try:
        pid = int(pid_file.read_text().strip())

        # Send termination signal
        os.kill(pid, signal.SIGTERM)
        print(f"⏹️  Server stopped (PID: {pid})")

        pid_file.unlink()

    except ProcessLookupError:
        print("❌ Server process not found")
        pid_file.unlink()  # Clean up stale PID file
    except ValueError:
        print("❌ PID file is corrupt")
        pid_file.unlink()
    except OSError as e:
        print(f"❌ Error stopping server: {e}")


if __name__ == "__main__":
    stop_server()
