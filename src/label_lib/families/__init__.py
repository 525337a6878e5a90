"""
Per-family grammar declarations.

Each module declares the Grammars and StreamingGrammars for one vendor or
group of parts and combines them into MultiGrammar families. The registry collects
the families at startup.
"""
