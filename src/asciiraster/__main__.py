from asciiraster.cli import run

run()
