"""Gallery viewer main module.

License: GNU General Public License v3 (GPLv3)
"""

import argparse

from .common import APPLICATION_DESCRIPTION


def main():
    """Parse arguments and start gallery viewer."""
    parser = argparse.ArgumentParser(description=f"{APPLICATION_DESCRIPTION}.")
    parser.add_argument('--config', type=str, default=None, help="path of the configuration file")
    args = parser.parse_args()

    # Import late to make sure the window is not created before the arguments
    # have been parsed.
    from .app import run_app
    run_app(args.config)


if __name__ == "__main__":
    main()
