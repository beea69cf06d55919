"""
AI Review Engine Module

This module forwards code to a hosted generative-AI model and returns the
model's markdown critique unchanged.

Design Decisions:
- Use the OpenAI SDK against the vendor's OpenAI-compatible endpoint
- One client per engine, built once and passed by reference
- A single request per review: no retry, no rate limiting
- Never log the code or the review body, only their sizes
"""

from typing import Dict, List, Optional

from openai import AsyncOpenAI

from revu.config import Settings, get_settings
from revu.logging_config import get_logger

logger = get_logger(__name__)


class AIReviewError(Exception):
    """Raised when the AI vendor fails to produce a review."""
    pass


class ReviewEngine:
    """
    AI-powered code review engine.

    Sends the user's code, prefixed by a fixed reviewer persona, to the
    configured model and hands back whatever text it produces.

    Usage:
        engine = ReviewEngine()
        markdown = await engine.generate_review(code)
    """

    SYSTEM_PROMPT = """**AI System Instruction: Senior Code Reviewer (7+ Years of Experience)**

**Responsibilities:**
- Review code for quality, best practices, efficiency, security, and scalability.
- Identify performance bottlenecks, bugs, and security risks.
- Suggest improvements for readability, maintainability, and test coverage.

**Review Guidelines:**
1. Provide clear, actionable feedback.
2. Suggest refactored code or alternatives.
3. Detect and resolve performance or security issues.
4. Ensure consistency with naming, style, and architecture principles (DRY, SOLID).
5. Verify test coverage and promote modern practices.

**Tone & Approach:**
- Be concise and precise, offering actionable improvements.
- Assume the developer is competent but always suggest improvements.
- Provide both praise and constructive criticism.

**Example Output:**

❌ **Bad Code:**
```javascript
function fetchData() {
    let data = fetch('/api/data').then(response => response.json());
    return data;
}
```

🔍 **Issues:**
- **❌** Async function not handling promises correctly.
- **❌** Missing error handling.

✅ **Fix:**
```javascript
async function fetchData() {
    try {
        const response = await fetch('/api/data');
        if (!response.ok) throw new Error("HTTP error");
        return await response.json();
    } catch (error) {
        console.error(error);
        return null;
    }
}
```

**Improvements:**
- **✔** Async/await is used correctly.
- **✔** Error handling added.

**Final Note:**
Ensure all code is efficient, secure, and maintainable, with a focus on scalability and readability.

**Adjustments needed? 🚀**"""

    def __init__(
        self,
        client: Optional[AsyncOpenAI] = None,
        settings: Optional[Settings] = None
    ):
        """
        Initialize the review engine.

        Args:
            client: Pre-built AI client; built from settings when omitted
            settings: Settings override, mostly for tests
        """
        self.settings = settings or get_settings()
        self.client = client or AsyncOpenAI(
            api_key=self.settings.get_api_key(),
            base_url=self.settings.ai_base_url
        )

    def build_messages(self, code: str) -> List[Dict[str, str]]:
        """Build the prompt: persona as system message, code untouched as user message."""
        return [
            {"role": "system", "content": self.SYSTEM_PROMPT},
            {"role": "user", "content": code}
        ]

    async def generate_review(self, code: str) -> str:
        """
        Review a code snippet.

        Args:
            code: Source code exactly as the user typed it

        Returns:
            The model's markdown review, verbatim

        Raises:
            AIReviewError: If the vendor call fails or returns nothing
        """
        logger.info(
            "Sending code review request to AI",
            model=self.settings.ai_model,
            code_length=len(code)
        )

        try:
            response = await self.client.chat.completions.create(
                model=self.settings.ai_model,
                messages=self.build_messages(code)
            )
        except Exception as e:
            logger.error(
                "AI review failed",
                error=str(e),
                error_type=type(e).__name__
            )
            raise AIReviewError(f"AI review failed: {e}") from e

        content = response.choices[0].message.content if response.choices else None
        if not content:
            logger.error("Empty response from AI")
            raise AIReviewError("Empty response from AI")

        logger.info("AI review completed", review_length=len(content))
        return content


# Singleton instance
_engine_instance: Optional[ReviewEngine] = None


def get_review_engine() -> ReviewEngine:
    """Get the singleton ReviewEngine instance."""
    global _engine_instance
    if _engine_instance is None:
        _engine_instance = ReviewEngine()
    return _engine_instance
