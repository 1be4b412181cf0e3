from themer.cli.main import cli

cli()
