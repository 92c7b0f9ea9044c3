from shortcode_stripper.cli import app

app()
