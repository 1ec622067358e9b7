"""MCP server exposing skill extraction, count overrides and the sorted view."""
import logging

from fastmcp import FastMCP
from fastmcp.exceptions import ToolError

from .config import Config
from .documents import load_document
from .exceptions import SkillSorterError
from .presentation import format_ranking, index_rows, ranking_rows
from .session import SkillSession, extract_skills

logger = logging.getLogger(__name__)

mcp = FastMCP("skill-sorter")

# Lazy initialization
_config = None
_session = None


def _get_config() -> Config:
    global _config
    if _config is None:
        _config = Config.load()
        errors = _config.validate()
        if errors:
            raise ToolError("Invalid configuration: " + "; ".join(errors))
    return _config


def _get_session() -> SkillSession:
    if _session is None:
        raise ToolError("No profile loaded - call load_profile first")
    return _session


def load_profile(path: str) -> dict:
    """
    Extract skills and endorsement counts from a saved profile.

    Accepts a saved LinkedIn profile page (.html/.htm) or a profile PDF
    export (.pdf). Replaces any previously loaded profile.

    Args:
        path: Filesystem path to the profile document

    Returns:
        Dict with the winning strategy, an optional notice, and the skills
        in document order with the index update_skill_count expects
    """
    global _session
    config = _get_config()
    try:
        document = load_document(path, item_selector=config.item_selector)
    except (FileNotFoundError, SkillSorterError) as exc:
        raise ToolError(str(exc)) from exc

    _session = extract_skills(document, config)
    result = _session.result
    return {
        "strategy": result.winning_strategy,
        "candidate_counts": {cs.strategy: len(cs) for cs in result.candidate_sets},
        "notice": result.notice,
        "skills": index_rows(_session.records),
    }


def update_skill_count(index: int, count: int) -> dict:
    """
    Correct the endorsement count of one skill.

    Args:
        index: Position of the skill as listed by load_profile (0-based)
        count: New endorsement count (non-negative)

    Returns:
        Dict with success flag and the skill as it now stands
    """
    session = _get_session()
    success = session.update_count(index, count)
    response = {"success": success, "index": index}
    if success:
        record = session.records[index]
        response["skill"] = record.name
        response["endorsements"] = record.count
    else:
        response["error"] = f"Invalid input. Index must be 0-{len(session) - 1} and count a non-negative integer."
    return response


def show_sorted_skills() -> dict:
    """
    Skills sorted by endorsement count (highest first, ties by name).

    Returns:
        Dict with ranked rows and the formatted text listing
    """
    ranking = _get_session().rank()
    return {
        "skills": ranking_rows(ranking),
        "text": format_ranking(ranking),
    }


mcp.tool()(load_profile)
mcp.tool()(update_skill_count)
mcp.tool()(show_sorted_skills)


def main() -> None:
    logging.basicConfig(
        level=_get_config().log_level_value,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )
    mcp.run()


if __name__ == "__main__":
    main()
