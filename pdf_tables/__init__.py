# ==============================================
# PDF Table Parser
# ==============================================
#
# Package Structure:
#
# pdf_tables/
# ├── extraction/         # PDF -> raw JSON records (Gemini)
# ├── normalization/      # raw JSON records -> typed ParsedTable
# ├── config.py           # Configuration management
# ├── pdf_table_parser.py # Orchestrator class
# └── cli.py              # Command line entry point
#
# ==============================================

__version__ = "0.1.0"
