from designer_cleaner.cli import run

run()
