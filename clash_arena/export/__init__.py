"""
Results Export

Modules:
- csv_export: Ranked results table and CSV file export
- card: Shareable results card figure
"""


def __getattr__(name):
    """Lazy imports so the CSV export does not pull in plotly."""
    if name in ("standings_frame", "results_csv_text", "export_results_csv",
                "results_filename", "card_filename"):
        from clash_arena.export import csv_export
        return getattr(csv_export, name)
    if name == "build_results_card":
        from clash_arena.export.card import build_results_card
        return build_results_card
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
