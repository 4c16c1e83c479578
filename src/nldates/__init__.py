"""Natural-language date resolution.

The resolver converts a free-text phrase ("next friday", "in 3 days", "15 Jan 2024") into a concrete
`datetime` relative to a reference instant, honoring a configurable week-start policy. Formatting of the
resolved instant is a caller concern (see `src.nldates.formatting`).
"""
