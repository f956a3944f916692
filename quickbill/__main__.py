import asyncio

from quickbill.cli.app import run_app
from quickbill.logging import configure_logging


def main() -> None:
    configure_logging()
    asyncio.run(run_app())


if __name__ == "__main__":
    main()
