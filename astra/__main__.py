from astra.main import run

run()
