"""Fixed report text, kept as lookup tables so every sentence is auditable.

Nothing here computes anything; the narrative and scoring modules select
entries by category and score band.
"""

from __future__ import annotations

from gitgrade.domain.entities import Category, Priority, RoadmapItem

# ── Category cards ──────────────────────────────────────────────────────────

CATEGORY_ICONS: dict[Category, str] = {
    Category.CODE_QUALITY: "code",
    Category.PROJECT_STRUCTURE: "folder",
    Category.DOCUMENTATION: "file",
    Category.TESTING: "test",
    Category.GIT_PRACTICES: "git",
    Category.SECURITY: "shield",
    Category.PERFORMANCE: "gauge",
    Category.ERROR_HANDLING: "alert",
    Category.PRACTICALITY: "idea",
}

# (score >= 80, score >= 60, below 60)
CATEGORY_DESCRIPTIONS: dict[Category, tuple[str, str, str]] = {
    Category.CODE_QUALITY: (
        "Your code is well-structured and follows good practices",
        "Code organization needs improvement",
        "Consider improving code structure and consistency",
    ),
    Category.PROJECT_STRUCTURE: (
        "Excellent file organization and folder structure",
        "Basic structure in place",
        "Reorganize files into logical folders (src/, docs/, tests/)",
    ),
    Category.DOCUMENTATION: (
        "Comprehensive documentation with clear instructions",
        "Good README with basic information",
        "Add setup instructions, usage examples, and API docs",
    ),
    Category.TESTING: (
        "Great test coverage and testing setup",
        "Some tests present",
        "Add unit tests and aim for 70%+ code coverage",
    ),
    Category.GIT_PRACTICES: (
        "Excellent commit messages and git workflow",
        "Good commit practices",
        "Write more descriptive commit messages",
    ),
    Category.SECURITY: (
        "Strong security practices implemented",
        "Basic security measures in place",
        "Add input validation and remove any exposed secrets",
    ),
    Category.PERFORMANCE: (
        "Well-optimized with performance considerations",
        "Decent performance setup",
        "Add build optimization and consider bundle size",
    ),
    Category.ERROR_HANDLING: (
        "Robust error handling throughout",
        "Basic error handling present",
        "Add try-catch blocks and user-friendly error messages",
    ),
    Category.PRACTICALITY: (
        "Solves real problems with clear value",
        "Addresses a specific use case",
        "Clarify the problem this project solves",
    ),
}

DESCRIPTION_BANDS: tuple[int, int] = (80, 60)


def describe_category(category: Category, score: int) -> str:
    """Pick the card description matching *score*."""
    excellent, good, needs_work = CATEGORY_DESCRIPTIONS[category]
    high, mid = DESCRIPTION_BANDS
    if score >= high:
        return excellent
    if score >= mid:
        return good
    return needs_work


# ── Summary ─────────────────────────────────────────────────────────────────

# Checked top-down; first threshold the overall score reaches wins.
SUMMARY_OPENERS: tuple[tuple[int, str], ...] = (
    (85, "🎉 Excellent work! Your repository demonstrates professional-level development practices. "),
    (70, "👍 Good job! Your repository shows solid development fundamentals with room for enhancement. "),
    (55, "📈 Your repository has a good foundation but needs some improvements to reach its full potential. "),
    (0, "🚀 Great start! With some focused improvements, this repository can become much stronger. "),
)

STRENGTHS_SENTENCE = (
    "Your strongest areas are {names}, which shows you understand these important aspects well. "
)
WEAKNESSES_SENTENCE = (
    "Focus on improving {names} to significantly boost your repository's quality. "
)

COMMUNITY_INTEREST = "The community interest in your project shows it addresses a real need. "
CLEAR_DESCRIPTION = "Your clear project description helps others understand its purpose. "
MISSING_DESCRIPTION = (
    "Consider adding a detailed description to help others understand your project's value. "
)

CLOSING_KEEP_BUILDING = (
    "Keep building - every improvement makes your repository more professional and valuable! 💪"
)
CLOSING_ON_TRACK = "You're on the right track to creating an industry-ready repository! 🌟"


# ── Roadmap ─────────────────────────────────────────────────────────────────

ROADMAP_TEMPLATES: dict[Category, RoadmapItem] = {
    Category.CODE_QUALITY: RoadmapItem(
        title="🧹 Refine Code Quality",
        description=(
            "Add a linter and formatter, keep functions small and focused, and "
            "declare dependencies in a manifest like package.json or requirements.txt."
        ),
        priority=Priority.MEDIUM,
    ),
    Category.PROJECT_STRUCTURE: RoadmapItem(
        title="📁 Organize Project Structure",
        description=(
            "Create clear folders like src/, docs/, tests/. Group related files together. "
            "This makes your project easier to navigate and understand."
        ),
        priority=Priority.MEDIUM,
    ),
    Category.DOCUMENTATION: RoadmapItem(
        title="📚 Enhance Documentation",
        description=(
            "Add clear setup instructions, usage examples, and screenshots. A good README "
            "should help someone understand and use your project in 5 minutes."
        ),
        priority=Priority.HIGH,
    ),
    Category.TESTING: RoadmapItem(
        title="🧪 Add Comprehensive Tests",
        description=(
            "Create unit tests for your main functions. Start with testing the most important "
            "features first. Tools like Jest, Vitest, or Pytest can help you get started quickly."
        ),
        priority=Priority.HIGH,
    ),
    Category.GIT_PRACTICES: RoadmapItem(
        title="📝 Improve Commit Messages",
        description=(
            "Write clear commit messages that explain what changed and why. Use format like "
            '"Add user authentication" instead of just "fix".'
        ),
        priority=Priority.LOW,
    ),
    Category.SECURITY: RoadmapItem(
        title="🔒 Improve Security Practices",
        description=(
            "Remove any hardcoded passwords or API keys. Add input validation to prevent common "
            "security issues. Use environment variables for sensitive data."
        ),
        priority=Priority.HIGH,
    ),
    Category.PERFORMANCE: RoadmapItem(
        title="⚡ Optimize Performance",
        description=(
            "Add build optimization, minimize bundle size, and implement caching where "
            "appropriate. Consider lazy loading for better user experience."
        ),
        priority=Priority.MEDIUM,
    ),
    Category.ERROR_HANDLING: RoadmapItem(
        title="🛠️ Enhance Error Handling",
        description=(
            "Add try-catch blocks around risky operations. Provide helpful error messages that "
            "guide users on what went wrong and how to fix it."
        ),
        priority=Priority.MEDIUM,
    ),
    Category.PRACTICALITY: RoadmapItem(
        title="💡 Show Real-World Value",
        description=(
            "Write a one-line description of the problem your project solves, add topics, "
            "and share it so others can try it and give feedback."
        ),
        priority=Priority.LOW,
    ),
}

CI_CD_ITEM = RoadmapItem(
    title="🚀 Set Up CI/CD Pipeline",
    description=(
        "Use GitHub Actions to automatically test your code when you push changes. "
        "This catches bugs early and shows professionalism."
    ),
    priority=Priority.MEDIUM,
)

PROJECT_GOALS_ITEM = RoadmapItem(
    title="🎯 Define Project Goals",
    description=(
        "Clearly explain what problem your project solves and who it's for. "
        "Add a demo or screenshots to show it in action."
    ),
    priority=Priority.HIGH,
)


# ── README checklist ────────────────────────────────────────────────────────

CHECKLIST_LABELS: tuple[str, ...] = (
    "Project Overview",
    "Setup Instructions",
    "Usage Examples",
    "Screenshots/Demo",
    "API Documentation",
    "Contributing Guide",
    "License",
    "Future Scope",
)
