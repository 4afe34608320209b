# topmark:header:start
#
#   project      : BuildBits
#   file         : __init__.py
#   file_relpath : src/buildbits/pipeline/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""BuildBits dispatch pipeline.

* [`buildbits.pipeline.job`][buildbits.pipeline.job]: jobs, results and output events.
* [`buildbits.pipeline.outputs`][buildbits.pipeline.outputs]: output path rules.
* [`buildbits.pipeline.dispatcher`][buildbits.pipeline.dispatcher]: the front controller.
"""
