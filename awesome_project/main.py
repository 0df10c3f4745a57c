import argparse
import logging

from awesome_project import CONFIG
from awesome_project.services import person_service

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog=CONFIG.main.app_name,
        description="Introduce a person, greet and print the current time."
    )
    parser.parse_args(argv)

    logger.debug('Starting %s', CONFIG.main.app_name)
    person_service.run()


if __name__ == "__main__":
    main()
