from mac_cleanup.cli import app

app(prog_name="mac-cleanup")
