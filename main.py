#!/usr/bin/env python3
# Usage: python main.py clone --token myToken --destination /my/destination
from ghclone.cli.main import app

if __name__ == "__main__":
    app()
