import argparse
import asyncio
import base64
import logging
import sys
from pathlib import Path

from dictation.config import load_settings, setup_logging
from dictation.db import ensure_schema, make_engine, make_sessionmaker
from dictation.service import create_dictation
from dictation.validation import validate_template

logger = logging.getLogger(__name__)

async def run(
    text_path: str,
    audio_path: str | None,
    title: str,
    description: str | None,
    author_id: int | None,
) -> int:
    settings = load_settings()
    setup_logging(settings)

    source_text = Path(text_path).read_text(encoding="utf-8")
    issues = validate_template(source_text)
    for issue in issues:
        print(f"{issue.severity.upper()}: {issue.message} (at {issue.position})")
    if any(issue.severity == "error" for issue in issues):
        return 1

    audio_b64 = None
    if audio_path:
        audio_b64 = base64.b64encode(Path(audio_path).read_bytes()).decode("ascii")

    engine = make_engine(settings)
    try:
        await ensure_schema(engine)
        Session = make_sessionmaker(engine)
        async with Session() as s:
            dictation = await create_dictation(
                s,
                title=title,
                source_text=source_text,
                audio_base64=audio_b64,
                description=description,
                author_id=author_id,
                audio_mime_type=settings.audio_mime_type,
            )
        print(f"OK dictation_id={dictation.id}")
        return 0
    except Exception:
        logger.exception("import_dictation_failed path=%s", text_path)
        return 1
    finally:
        await engine.dispose()

def main(argv: list[str]) -> int:
    parser = argparse.ArgumentParser(description="Create a dictation from a [bracketed] text file.")
    parser.add_argument("text", help="UTF-8 text file with [word] blanks")
    parser.add_argument("--audio", help="audio file read aloud to the students")
    parser.add_argument("--title", required=True)
    parser.add_argument("--description")
    parser.add_argument("--author-id", type=int)
    args = parser.parse_args(argv)
    return asyncio.run(run(args.text, args.audio, args.title, args.description, args.author_id))

if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
