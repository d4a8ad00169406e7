"""Starter .gitglean.toml template."""

DEFAULT_TOML = """\
# gitglean configuration
version = "1.0"

[git]
timeout = 30                      # seconds per git invocation
max_status_buffer_size = 20000000 # bytes; larger status output is not decoded

[logging]
level = "WARNING"                 # TRACE | DEBUG | INFO | WARNING | ERROR

[errors]
# disable = ["NOTHING_TO_COMMIT"] # error kinds whose rules are switched off
rules_dir = ".gitglean-rules"     # YAML files with extra {kind, pattern} rules

[progress]
track_lfs = false

[output]
format = "terminal"               # terminal | json
"""
