"""
Event Topics for csgrid

All pub/sub topics are defined here for easy discovery and documentation.
Topic naming convention: <category>.<action>

Every topic is always published with the same keyword arguments, listed
under each name.
"""

# Run lifecycle events
RUN_STARTED = "run.started"
"""Published before a selection is processed. Params: count"""

RUN_FINISHED = "run.finished"
"""Published after a selection is processed. Params: processed, failed"""

# Container events
CONTAINER_ARRANGED = "container.arranged"
"""Published when a component set was arranged. Params: container, plan"""

CONTAINER_SKIPPED = "container.skipped"
"""Published when a selected node is left untouched. Params: container, reason"""

CONTAINER_FAILED = "container.failed"
"""Published when the host rejected a step. Params: container, error"""

# User-facing notices
NOTIFY = "ui.notify"
"""Published for messages meant for the user. Params: message"""

# Reasons carried by CONTAINER_SKIPPED
SKIP_NOT_COMPONENT_SET = "not_component_set"
SKIP_NO_VARIANTS = "no_variants"
