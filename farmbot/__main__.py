from farmbot.main import run

run()
