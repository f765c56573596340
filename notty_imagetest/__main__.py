"""Entry point for running notty_imagetest as a module."""
from .cli import main


if __name__ == "__main__":
    main()
