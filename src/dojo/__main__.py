from dojo.main import run

run()
