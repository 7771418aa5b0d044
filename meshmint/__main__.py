"""Run the action server: ``python -m meshmint``."""

import uvicorn

from meshmint.config import CONFIG


def main():
    uvicorn.run("meshmint.app:app", host="0.0.0.0", port=CONFIG["port"])


if __name__ == "__main__":
    main()
