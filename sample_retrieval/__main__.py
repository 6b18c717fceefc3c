from sample_retrieval.cli import main_cli

main_cli()
