# Core package initialization
# Cross-cutting concerns: configuration, errors, logging and the
# helpers the Flask adapter shares across controllers.
#
# Submodules are imported explicitly (``from medportal.core import config``);
# the domain layer imports ``core.exceptions`` and must not pull in Flask.
