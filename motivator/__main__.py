from motivator.main import run

run()
