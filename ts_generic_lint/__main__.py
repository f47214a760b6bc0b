from ts_generic_lint.cli import cli

if __name__ == "__main__":
    cli()
