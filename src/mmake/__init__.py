"""mmake - A minimal timestamp-driven build orchestrator."""

from .context import BuildRequest as BuildRequest
from .engine import BuildEngine as BuildEngine
from .errors import ConfigurationError as ConfigurationError
from .errors import MakeError as MakeError
from .errors import SpawnError as SpawnError
from .hcl import read_rules as read_rules
from .resolve import Resolver as Resolver
from .rules import Rule as Rule
from .rules import RuleTable as RuleTable
from .runner import CommandRunner as CommandRunner
from .runner import ProcessOutcome as ProcessOutcome
from .staleness import StalenessChecker as StalenessChecker
