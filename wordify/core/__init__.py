"""Core regrouping pipeline and intermediate representation modules.

WHY: The core package holds the part with real invariants — alignment
between two independently segmented word streams derived from one shared
chunk sequence. Everything outside it is plumbing around this contract.

HOW: ir.py defines the data structures, reconstructor.py rebuilds both
texts, segmenter.py splits them into words, resequencer.py merges the two
word lists, consolidator.py joins adjacent runs, pipeline.py wires it up.

RULES:
- IR dataclasses are the contract — change with care
- No I/O, no global state, no formatter-specific logic here
"""
