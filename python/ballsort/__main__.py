from ballsort.cli import app

app()
