# howmuch/main.py
from howmuch.cli import commands

if __name__ == '__main__':
    commands.cli()
