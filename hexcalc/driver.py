import dataclasses
import logging
from dataclasses import dataclass, field

from hexcalc.config import DEFAULT_CONFIG, LanguageConfig
from hexcalc.processor import StatementOutcome, process
from hexcalc.runtime import VariableTable

logger = logging.getLogger(__name__)


@dataclass
class Segment:
    text: str
    terminated: bool


@dataclass
class ProgramResult:
    outcomes: list[StatementOutcome] = field(default_factory=list)
    variables: VariableTable = field(default_factory=dict)


def split_statements(source: str, config: LanguageConfig = DEFAULT_CONFIG) -> list[Segment]:
    """Cut source text on the terminator, dropping segments that are blank after trimming.

    The last segment is marked unterminated when the source does not end with
    a terminator.
    """
    *terminated, rest = source.split(config.terminator)
    segments = [Segment(text=s.strip(), terminated=True) for s in terminated]
    segments.append(Segment(text=rest.strip(), terminated=False))
    return [s for s in segments if s.text]


def run(source: str, config: LanguageConfig = DEFAULT_CONFIG) -> ProgramResult:
    """Process every statement of ``source`` in order against a fresh variable table.

    Never fails as a whole: each statement gets its own outcome and later
    statements see the assignments of earlier successful ones.
    """
    result = ProgramResult()
    for segment in split_statements(source, config):
        outcome = process(segment.text, result.variables, config)
        if segment.terminated or outcome.accepted:
            outcome = dataclasses.replace(outcome, raw_text=outcome.raw_text + config.terminator)
        result.outcomes.append(outcome)

    logger.debug(
        "Processed %d statements, %d rejected, %d variables defined",
        len(result.outcomes),
        sum(1 for o in result.outcomes if not o.accepted),
        len(result.variables),
    )
    return result
