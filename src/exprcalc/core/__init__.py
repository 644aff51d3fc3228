"""exprcalc core: result type, IR, expression pipeline, calculator and config."""
