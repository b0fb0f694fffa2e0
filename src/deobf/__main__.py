from deobf.cli import cli

cli()
