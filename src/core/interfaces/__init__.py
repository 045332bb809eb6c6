"""Stream contracts the bobcat pipeline is written against.

Anything with `readinto` can be an operand source and anything with
`write`/`flush` can be the output, real files and `io.BytesIO` alike.
"""
