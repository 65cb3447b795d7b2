import socket

import uvicorn

from mealplan.api.api_run import app
from mealplan.utilities.config import APP_HOST, APP_PORT


def get_local_ip() -> str:
    """Return a non-loopback local IP address if possible, otherwise '127.0.0.1'.

    A UDP socket asks the OS which interface would reach a public IP; no data
    is sent.
    """
    s = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
    try:
        s.connect(("8.8.8.8", 80))
        ip = str(s.getsockname()[0])
    except OSError:
        ip = "127.0.0.1"
    finally:
        s.close()
    return ip


def main():
    local_url = f"http://localhost:{APP_PORT}"
    local_ip = get_local_ip()
    print(f"Uvicorn running on {local_url} (Press CTRL+C to quit)")
    if local_ip not in ("127.0.0.1", "localhost"):
        print(f"Accessible from other devices at: http://{local_ip}:{APP_PORT}")
    uvicorn.run(app, host=APP_HOST, port=APP_PORT)


if __name__ == "__main__":
    main()
