"""Entrypoint for the packaged terminal. PyInstaller runs this; it starts the console ATM."""
from atm.main import main


if __name__ == "__main__":
    main()
