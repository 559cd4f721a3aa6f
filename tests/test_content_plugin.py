"""
Tests for ContentPlugin and the content templates.
"""

import pytest

from executive_assistant.constants.assistant_messages import CONTENT_CLARIFICATION
from executive_assistant.models.intent import Intent
from executive_assistant.plugins.content_plugin import (
    ContentPlugin,
    VIRAL_FORMULAS,
    build_content_calendar,
    build_weekly_content_calendar,
    generate_prompts,
    generate_viral_caption,
    get_optimal_posting_times,
    prompt_template_library,
)

INTENT = Intent(category="prompts", confidence=0.7, action="prompt_generation")


class TestContentPlugin:
    """Tests for ContentPlugin."""

    @pytest.mark.asyncio
    async def test_content_calendar_for_business(self, mock_context):
        """Test a calendar request yields five weekday entries naming the business."""
        mock_context.business_context = "Acme"
        plugin = ContentPlugin(mock_context)

        result = await plugin.handle(INTENT, "generate a content calendar")

        assert result["response"] == "Here's your weekly content calendar for Acme:"
        calendar = result["calendar"]
        assert len(calendar) == 5
        assert [entry["day"] for entry in calendar] == [
            "Monday", "Tuesday", "Wednesday", "Thursday", "Friday"
        ]
        for entry in calendar:
            assert set(entry) == {"day", "theme", "content", "postIdea", "optimalTime"}
            assert entry["postIdea"]
            assert "Acme" in entry["postIdea"]

    @pytest.mark.asyncio
    async def test_weekly_calendar_phrase(self, mock_context):
        """Test the weekly calendar phrase selects the calendar."""
        plugin = ContentPlugin(mock_context)

        result = await plugin.handle(INTENT, "Plan my Weekly Calendar")

        assert "calendar" in result
        assert "prompts" not in result

    @pytest.mark.asyncio
    async def test_image_prompts(self, mock_context):
        """Test an image prompt request yields five prompts naming the business."""
        mock_context.business_context = "Acme Insurance"
        plugin = ContentPlugin(mock_context)

        result = await plugin.handle(INTENT, "Give me a high-end image idea")

        assert result["response"] == "Here are 5 professional high-end image prompts for Acme Insurance:"
        assert result["promptType"] == "high-end-image"
        assert len(result["prompts"]) == 5
        assert all("Acme Insurance" in prompt for prompt in result["prompts"])

    @pytest.mark.asyncio
    async def test_generate_keyword_yields_image_prompts(self, mock_context):
        """Test the generic generate keyword selects image prompts."""
        plugin = ContentPlugin(mock_context)

        result = await plugin.handle(INTENT, "Generate something for Instagram")

        assert len(result["prompts"]) == 5

    @pytest.mark.asyncio
    async def test_image_prompt_phrase_outranks_calendar(self, mock_context):
        """Test explicit image phrases win over calendar phrases."""
        plugin = ContentPlugin(mock_context)

        result = await plugin.handle(INTENT, "image prompt for my content calendar")

        assert "prompts" in result
        assert "calendar" not in result

    @pytest.mark.asyncio
    async def test_default_business_context(self, mock_context):
        """Test templates fall back to a generic business name."""
        plugin = ContentPlugin(mock_context)

        result = await plugin.handle(INTENT, "image prompt please")

        assert "your business" in result["response"]
        assert all("your business" in prompt for prompt in result["prompts"])

    @pytest.mark.asyncio
    async def test_other_requests_get_clarifying_question(self, mock_context):
        """Test unrelated content requests get a clarifying question."""
        plugin = ContentPlugin(mock_context)

        result = await plugin.handle(INTENT, "help with a newsletter")

        assert result == CONTENT_CLARIFICATION


class TestContentTemplates:
    """Tests for module-level template builders."""

    def test_calendar_defaults(self):
        """Test calendar defaults distinguish business and services wording."""
        calendar = build_content_calendar(None)

        assert "your business" in calendar[0]["postIdea"]
        assert "your services" in calendar[1]["postIdea"]
        assert "your services" in calendar[2]["postIdea"]

    def test_viral_caption_formula(self):
        """Test a known formula is filled in."""
        result = generate_viral_caption("Acme AI", "business owners", "curiosity")

        assert result["caption"].startswith("Why do 90% of business owners fail")
        assert "Acme AI" in result["caption"]
        assert result["postType"] == "curiosity"
        assert result["hashtag_suggestions"][:2] == ["#AcmeAI", "#businessowners"]
        assert len(result["engagement_tips"]) == 5

    @pytest.mark.parametrize("post_type", [None, "unknown"])
    def test_viral_caption_defaults_to_story(self, post_type):
        """Test unknown formulas use the story formula."""
        result = generate_viral_caption("Acme", "consumers", post_type)

        assert result["caption"] == VIRAL_FORMULAS["story"].format(business="Acme", audience="consumers")


class TestContentToolkit:
    """Tests for the prompt, calendar and posting-time builders."""

    @pytest.mark.parametrize("prompt_type", ["high-end-image", "viral-video", "billy-gene-ads"])
    def test_generate_prompts_families(self, prompt_type):
        """Test each family yields five filled prompts."""
        result = generate_prompts(prompt_type, "Acme Roofing", "homeowners")

        assert result["promptType"] == prompt_type
        assert len(result["prompts"]) == 5
        assert all("Acme Roofing" in prompt or "homeowners" in prompt for prompt in result["prompts"])
        assert all("{" not in prompt for prompt in result["prompts"])

    def test_generate_prompts_ad_copy_fields(self):
        """Test ad prompts interpolate the style and product description."""
        result = generate_prompts(
            "billy-gene-ads",
            "Acme Roofing",
            "homeowners",
            content_goal="leads",
            style="playful",
            context="storm damage repair"
        )

        assert result["prompts"][0].endswith("In this case Acme Roofing is storm damage repair.")
        assert "in a playful tone" in result["prompts"][2]
        assert result["generatedFor"] == {
            "business": "Acme Roofing",
            "audience": "homeowners",
            "contentGoal": "leads",
            "style": "playful",
        }

    def test_generate_prompts_unknown_type_uses_images(self):
        """Test unknown prompt types fall back to the high-end image family."""
        result = generate_prompts("radio-spot", "Acme", "drivers")

        assert result["prompts"] == generate_prompts("high-end-image", "Acme", "drivers")["prompts"]
        assert result["promptType"] == "radio-spot"

    def test_prompt_template_library(self):
        """Test the library exposes four categories and counts every template."""
        library = prompt_template_library()

        assert list(library["templates"]) == [
            "Audience Research",
            "High-End Image Prompts",
            "Viral Video Concepts",
            "Viral Content Ideas",
        ]
        assert library["totalTemplates"] == 18

    def test_weekly_calendar_spans_weeks(self):
        """Test every week covers seven days with three post ideas each."""
        calendar = build_weekly_content_calendar("Acme", "founders", weeks=2)

        assert len(calendar) == 14
        assert [entry["week"] for entry in calendar] == [1] * 7 + [2] * 7
        assert calendar[0]["day"] == "Monday"
        assert calendar[6]["day"] == "Sunday"
        for entry in calendar:
            assert len(entry["postIdeas"]) == 3
            assert entry["hashtags"]
            assert entry["business"] == "Acme"
        assert calendar[0]["postIdeas"][0] == "Success story: How founders transformed their results with Acme"

    def test_weekly_calendar_rejects_zero_weeks(self):
        """Test at least one week is required."""
        with pytest.raises(ValueError):
            build_weekly_content_calendar("Acme", "founders", weeks=0)

    def test_optimal_posting_times(self):
        """Test platform and audience select the day table."""
        result = get_optimal_posting_times("Instagram", "business-owners")

        assert result["optimal_times"]["Monday"] == ["6:00 AM", "12:00 PM", "7:00 PM"]
        assert result["optimal_times"]["Friday"] == ["6:00 AM", "12:00 PM", "5:00 PM"]
        assert result["timezone"] == "US/Central"
        assert result["engagement_insights"]["peak_days"] == ["Tuesday", "Wednesday", "Thursday"]

    def test_optimal_posting_times_fallbacks(self):
        """Test unknown platforms and audiences use Facebook business owners."""
        result = get_optimal_posting_times("MySpace", "retirees", "US/Eastern")

        assert result["platform"] == "MySpace"
        assert result["timezone"] == "US/Eastern"
        assert result["optimal_times"]["Saturday"] == ["12:00 PM", "2:00 PM"]
        assert len(result["optimal_times"]) == 7
