import asyncio

from leetstats.app import StatsApp, setup_logging


def main():
    setup_logging()
    app = StatsApp()
    asyncio.run(app.run())


if __name__ == "__main__":
    main()
