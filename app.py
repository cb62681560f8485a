#!/usr/bin/env python3
"""
Main entry point for the Dev Toolbox application.
This file serves as the application launcher that imports and runs the Flask app from the src directory.
"""

import sys
import os
import argparse
from pathlib import Path

# Add the src directory to the Python path so we can import from it
project_root = Path(__file__).parent
src_path = project_root / "src"
sys.path.insert(0, str(src_path))

# Now we can import the main Flask application
from main import app
from config.settings import get_config_directory


def write_port_file(port):
    """Write the port number to .port file for other processes to read."""
    config_dir = get_config_directory()
    config_dir.mkdir(parents=True, exist_ok=True)
    port_file = config_dir / ".port"
    with open(port_file, 'w') as f:
        f.write(str(port))
    print(f"Port {port} written to {port_file}")


def cleanup_port_file():
    """Remove the .port file on shutdown."""
    port_file = get_config_directory() / ".port"
    if port_file.exists():
        port_file.unlink()
        print("Port file cleaned up")


def write_pid_file():
    pid_file = project_root / "dev-toolbox.pid"
    pid_file.write_text(str(os.getpid()))
    return pid_file


if __name__ == '__main__':
    parser = argparse.ArgumentParser(description='Dev Toolbox Server')
    parser.add_argument('--port', '-p', type=int, default=8000,
                        help='Port to run the server on (default: 8000)')
    parser.add_argument('--host', default='127.0.0.1',
                        help='Host to bind to (default: 127.0.0.1)')
    parser.add_argument('--debug', action='store_true',
                        help='Run Flask in debug mode')
    args = parser.parse_args()

    # Change working directory to project root to ensure relative paths work correctly
    os.chdir(project_root)

    write_port_file(args.port)
    pid_file = write_pid_file()

    try:
        print(f"Starting Dev Toolbox on http://{args.host}:{args.port}")
        # The reloader would fork a second process with a different pid
        app.run(host=args.host, port=args.port, debug=args.debug, use_reloader=False)
    except KeyboardInterrupt:
        print("\nServer stopped by user")
    finally:
        cleanup_port_file()
        if pid_file.exists():
            pid_file.unlink()
