"""
Run context detection over sample lines and report the switching decisions.

Each sample marks the cursor with "|", e.g.:

    python run_detection.py "hello 你好 |" "你好\n|hello"

Without arguments a built-in set of samples is used. Input sources come
from the environment (see smart_input/config/settings.py); the active
source starts as the secondary one.
"""
import logging
import sys

from smart_input.config.settings import LOG_LEVEL

# ---------------------------------------------------------------------------
# Setup logging
# ---------------------------------------------------------------------------
logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s [%(levelname)s] %(name)s - %(message)s",
    stream=sys.stdout,
)
logger = logging.getLogger("run_detection")

from smart_input.models.buffer import StringBuffer
from smart_input.models.source_config import SourceConfig
from smart_input.switching.adapters import InMemoryInputSource
from smart_input.switching.session import BufferSession

DEFAULT_SAMPLES = [
    "hello 你好 |",
    "你好 |hello",
    "你好\n|hello",
    "abc |你好",
    "|你好",
    "hello\n|",
    "|",
]

samples = [s.replace("\\n", "\n") for s in sys.argv[1:]] or DEFAULT_SAMPLES
sources = SourceConfig.from_settings()

if sources is None:
    logger.warning("No input sources resolved; decisions are reported without switching")
else:
    logger.info("tool              : %s", sources.tool)
    logger.info("primary source    : %s", sources.primary_source)
    logger.info("secondary source  : %s", sources.secondary_source)

# ---------------------------------------------------------------------------
# Detection
# ---------------------------------------------------------------------------
print("\n" + "=" * 70)
print("CONTEXT DETECTION SUMMARY")
print("=" * 70)

for sample in samples:
    try:
        buffer, cursor = StringBuffer.with_cursor(sample)
    except ValueError as e:
        logger.error("Skipping sample %r: %s", sample, e)
        continue

    input_source = InMemoryInputSource(sources.secondary_source) if sources is not None else None
    session = BufferSession.from_settings(buffer, input_source=input_source)

    verdict = session.classify(cursor)
    region = session.controller.region
    switched = session.apply_verdict(verdict)

    print(f"{sample!r:24s} verdict={verdict.value if verdict else None!s:10s} "
          f"region={region!r:24s} switch={switched}")

print("=" * 70 + "\n")
