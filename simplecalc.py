"""
SimpleCalc
Main application entry point
"""
import logging
import socket

import config
from api import app


def get_local_ip():
    try:
        s = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
        # doesn't even have to be reachable
        s.connect(('10.255.255.255', 1))
        ip = s.getsockname()[0]
        s.close()
    except OSError:
        ip = '127.0.0.1'
    return ip


def main():
    logging.basicConfig(level=config.LOG_LEVEL, format=config.LOG_FORMAT)

    print("\n" + "=" * 60)
    print(f"{config.APP_NAME} {config.VERSION} API Server")
    print("=" * 60)
    print(f"Access on this PC:    http://localhost:{config.WEB_PORT}/api")
    if config.WEB_HOST == '0.0.0.0':
        print(f"Access from network:  http://{get_local_ip()}:{config.WEB_PORT}/api")
    print("=" * 60 + "\n")

    # Single-threaded: the keypad session is shared by every request
    app.run(host=config.WEB_HOST, port=config.WEB_PORT, debug=False, threaded=False)


if __name__ == "__main__":
    main()
