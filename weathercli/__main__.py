from weathercli.cli import run

run()
