"""Allow running as: python -m power_position [--config path]."""

import argparse

from power_position.runner import main


def cli() -> None:
    parser = argparse.ArgumentParser(description="Day-ahead power position extract")
    parser.add_argument("--config", default=None, help="Path to config.yaml")
    args = parser.parse_args()
    main(config_path=args.config)


if __name__ == "__main__":
    cli()
