"""
Content generation plugin.

Handles prompt-generation and content-planning requests with fixed template
families: high-end image prompts, a weekly content calendar and viral
captions. Every template is parameterized by the caller's business context.

The module-level builders also back the content toolkit endpoints: prompt
families, the prompt template library, multi-week calendars and posting times.
"""

import logging
import re
from typing import Any, Dict, List, Optional, Union

from executive_assistant.constants.assistant_messages import (
    CONTENT_CLARIFICATION,
    DEFAULT_BUSINESS_CONTEXT,
    DEFAULT_SERVICES_CONTEXT,
)
from executive_assistant.models.intent import Intent
from executive_assistant.plugins.agent_context import AgentContext

HIGH_END_IMAGE = "high-end-image"

IMAGE_PROMPT_PHRASES = ("image prompt", "high-end image")
CALENDAR_PHRASES = ("content calendar", "weekly calendar")
GENERATE_KEYWORD = "generate"

VIRAL_FORMULAS = {
    "controversy": (
        "🔥 Unpopular opinion about {business}...\n\n"
        "Most {audience} think [common belief], but here's why that's completely wrong:\n\n"
        "[3 reasons why]\n\n"
        "That's exactly why {business} works differently.\n\n"
        "Agree or disagree? 👇"
    ),
    "story": (
        "I used to be just like every other {audience}...\n\n"
        "Struggling with [problem] until I discovered something that changed everything.\n\n"
        "[Short transformation story]\n\n"
        "That's when {business} became a game-changer.\n\n"
        "Can you relate? Drop a 💯 if yes!"
    ),
    "curiosity": (
        "Why do 90% of {audience} fail at [goal]?\n\n"
        "(It's not what you think...)\n\n"
        "Most people blame [common excuse]\n\n"
        "But the real reason is [insight]\n\n"
        "That's exactly what {business} solves.\n\n"
        "Want to know how? Link in bio 👆"
    ),
    "educational": (
        "🧠 3 things about [topic] that {audience} never consider:\n\n"
        "1️⃣ [Insight 1]\n2️⃣ [Insight 2]\n3️⃣ [Insight 3]\n\n"
        "This is exactly why {business} works when everything else fails.\n\n"
        "Which one surprised you most? 🤔"
    ),
    "social_proof": (
        "\"I can't believe the results I got with {business}!\"\n\n"
        "- Real {audience} member\n\n"
        "[Specific result/transformation]\n\n"
        "This is exactly what happens when {audience} finally try the right approach.\n\n"
        "Ready for your transformation? 🚀"
    ),
}

DEFAULT_VIRAL_FORMULA = "story"

OPTIMAL_TIMES_BY_AUDIENCE = {
    "business-owners": ["9:00 AM", "1:00 PM", "7:00 PM"],
    "consumers": ["8:00 AM", "12:00 PM", "6:00 PM"],
    "professionals": ["7:00 AM", "12:00 PM", "5:00 PM"],
}

ENGAGEMENT_TIPS = [
    "Post when your audience is most active",
    "Use 3-5 relevant hashtags",
    "Include a clear call-to-action",
    "Respond to comments within 1 hour",
    "Add engaging visual content",
]


def build_image_prompts(business_context: Optional[str]) -> List[str]:
    """
    Build the five high-end image prompts.

    Args:
        business_context: Business to feature. Defaults to "your business".

    Returns:
        Five prompt strings.
    """
    business = business_context or DEFAULT_BUSINESS_CONTEXT
    return [
        f"Create a cinematic, high-budget commercial style image of {business}. Shot with "
        "professional lighting, shallow depth of field, and dramatic color grading. Include "
        "luxury brand aesthetics, premium materials, and sophisticated composition that "
        "conveys exclusivity and high value for business owners.",
        f"Professional lifestyle photography showing business owners using {business} services "
        "in an aspirational setting. Clean, modern aesthetic with natural lighting. Show the "
        "transformation and elevated lifestyle this service enables. Include authentic human "
        "emotion and premium environment details.",
        "Split-screen comparison image showing 'before and after' or 'problem vs solution' for "
        "business owners. Left side shows business frustration/difficulty, right side shows "
        f"ease/success with {business}. Professional photography with clear visual "
        "storytelling and emotional impact.",
        f"Professional headshot/environment showing expertise and credibility around {business}. "
        "Include certifications, awards, professional setting, and visual elements that "
        "establish authority for business owners. Warm, trustworthy lighting with "
        "confidence-inspiring composition.",
        f"Dynamic collage showing multiple happy business owners using {business}. Include "
        "diverse demographics, genuine expressions, and results/outcomes. Professional montage "
        "style with consistent branding and positive energy throughout.",
    ]


def build_content_calendar(business_context: Optional[str]) -> List[Dict[str, str]]:
    """
    Build a Monday to Friday content calendar.

    Args:
        business_context: Business to feature. Defaults to "your business"
            ("your services" in service-oriented post ideas).

    Returns:
        Five entries with day, theme, content, postIdea and optimalTime.
    """
    business = business_context or DEFAULT_BUSINESS_CONTEXT
    services = business_context or DEFAULT_SERVICES_CONTEXT
    return [
        {
            "day": "Monday",
            "theme": "Motivation Monday",
            "content": f"Inspirational content and success stories for business owners using {business}",
            "postIdea": f"Success story: How business owners transformed their results with {business}",
            "optimalTime": "8:00 AM",
        },
        {
            "day": "Tuesday",
            "theme": "Tips Tuesday",
            "content": "Educational content and industry insights for business owners",
            "postIdea": f"5 tips business owners need to know about {services}",
            "optimalTime": "9:00 AM",
        },
        {
            "day": "Wednesday",
            "theme": "Wisdom Wednesday",
            "content": "Expert advice and problem-solving for business owners",
            "postIdea": f"Industry secrets business owners should know about {services}",
            "optimalTime": "11:00 AM",
        },
        {
            "day": "Thursday",
            "theme": "Throwback Thursday",
            "content": "Case studies and testimonials from business owners",
            "postIdea": f"Case study: Business owner success story with {business}",
            "optimalTime": "2:00 PM",
        },
        {
            "day": "Friday",
            "theme": "Feature Friday",
            "content": "Service highlights and demos for business owners",
            "postIdea": f"Feature spotlight: How {business} helps business owners",
            "optimalTime": "3:00 PM",
        },
    ]


def generate_viral_caption(
    business: str,
    audience: str,
    post_type: Optional[str] = None
) -> Dict[str, Any]:
    """
    Generate a viral caption with posting guidance.

    Args:
        business: Business or product name.
        audience: Target audience, e.g. "business-owners".
        post_type: Formula name. Unknown or missing types use the story formula.

    Returns:
        Caption, the post type, optimal times, engagement tips and hashtags.
    """
    formula = VIRAL_FORMULAS.get(post_type or DEFAULT_VIRAL_FORMULA, VIRAL_FORMULAS[DEFAULT_VIRAL_FORMULA])
    business_tag = re.sub(r"\s+", "", business)
    audience_tag = re.sub(r"\s+", "", audience)

    return {
        "caption": formula.format(business=business, audience=audience),
        "postType": post_type,
        "optimalTimes": OPTIMAL_TIMES_BY_AUDIENCE,
        "engagement_tips": list(ENGAGEMENT_TIPS),
        "hashtag_suggestions": [
            f"#{business_tag}",
            f"#{audience_tag}",
            "#Success",
            "#Transformation",
            "#Results",
        ],
    }


PROMPT_FAMILIES = {
    HIGH_END_IMAGE: [
        "Create a cinematic, high-budget commercial style image of {business}. Shot with "
        "professional lighting, shallow depth of field, and dramatic color grading. Include "
        "luxury brand aesthetics, premium materials, and sophisticated composition that "
        "conveys exclusivity and high value for {audience}.",
        "Professional lifestyle photography showing {audience} using {business} in an "
        "aspirational setting. Clean, modern aesthetic with natural lighting. Show the "
        "transformation and elevated lifestyle this product enables. Include authentic human "
        "emotion and premium environment details.",
        "Split-screen comparison image showing 'before and after' or 'problem vs solution' for "
        "{audience}. Left side shows frustration/difficulty, right side shows ease/success with "
        "{business}. Professional photography with clear visual storytelling and emotional impact.",
        "Professional headshot/environment showing expertise and credibility around {business}. "
        "Include certifications, awards, professional setting, and visual elements that "
        "establish authority for {audience}. Warm, trustworthy lighting with "
        "confidence-inspiring composition.",
        "Dynamic collage showing multiple happy {audience} members using {business}. Include "
        "diverse demographics, genuine expressions, and results/outcomes. Professional montage "
        "style with consistent branding and positive energy throughout.",
    ],
    "viral-video": [
        "Time-lapse video showing dramatic transformation using {business}. Start with 'before' "
        "state, show process/journey, end with amazing 'after' results for {audience}. Include "
        "uplifting music, smooth transitions, and emotional payoff that makes viewers want to share.",
        "Authentic behind-the-scenes footage showing how {business} is created or delivered. "
        "Include 'wow' moments, expertise in action, and personality for {audience}. Raw, "
        "genuine feel that builds trust and showcases craftsmanship or process excellence.",
        "Real {audience} member testimonial in documentary-style format. Show their initial "
        "problem, how they found {business} solution, and the amazing results. Include genuine "
        "emotion, specific details, and visual proof of transformation or success.",
        "Educational content that hooks viewers with \"Did you know...\" or \"Here's what "
        "[industry] doesn't want {audience} to know about [topic]\". Share valuable insights "
        "while positioning {business} as the solution. Include visual aids and clear explanations.",
        "Adapt current trending video format/challenge to showcase {business}. Include popular "
        "music, trending effects, and format that {audience} engages with, while naturally "
        "integrating your value proposition.",
    ],
    "billy-gene-ads": [
        "Give me 10 different types of audiences that would be interested in trading me money "
        "in exchange for {business}. In this case {business} is {context}.",
        "What are 10 problems that {audience} specifically experience that {business} can help "
        "solve, alleviate, or remedy.",
        "Write a Facebook ad to sell {business} for {audience} who is experiencing [insert "
        "chosen problem above]. Write from the perspective of the business owner in a {style} "
        "tone. Use urgency-based incentives and clear call to action.",
        "What are 10 opinions that people argue about when it comes to {business}. Create "
        "viral content around these controversial topics for {audience}.",
        "Give me 10 tips about {business} that {audience} probably doesn't know but would "
        "appreciate. Make this educational and valuable content that positions you as an authority.",
    ],
}

DEFAULT_PROMPT_STYLE = "professional"
DEFAULT_PROMPT_CONTEXT = "your product/service"

PROMPT_TEMPLATE_LIBRARY = {
    "Audience Research": {
        "Audience Discovery": (
            "Give me 10 different types of audiences that would be interested in trading me "
            "money in exchange for [INSERT PRODUCT OR SERVICE]."
        ),
        "Demographics Analysis": (
            "Tell me the typical demographics and characteristics of a [CHOSEN SPECIFIC AUDIENCE]"
        ),
        "Problem Identification": (
            "What are 10 problems that [INSERT SELECTED AUDIENCE] specifically experience that "
            "[INSERT SELECTED PRODUCT OR SERVICE] can help solve, alleviate, or remedy."
        ),
    },
    "High-End Image Prompts": {
        "Cinematic Brand Story": (
            "Create a cinematic, high-budget commercial style image of [PRODUCT/SERVICE]. Shot "
            "with professional lighting, shallow depth of field, and dramatic color grading."
        ),
        "Lifestyle Aspiration": (
            "Professional lifestyle photography showing [TARGET AUDIENCE] using [PRODUCT/SERVICE] "
            "in an aspirational setting. Clean, modern aesthetic with natural lighting."
        ),
        "Problem-Solution Visual": (
            "Split-screen comparison image showing 'before and after' or 'problem vs solution' "
            "for [SPECIFIC PROBLEM]. Professional photography with clear visual storytelling."
        ),
        "Authority Builder": (
            "Professional headshot/environment showing expertise and credibility around "
            "[INDUSTRY/SERVICE]. Include certifications, awards, professional setting."
        ),
        "Social Proof Showcase": (
            "Dynamic collage showing multiple happy customers/testimonials using "
            "[PRODUCT/SERVICE]. Include diverse demographics and genuine expressions."
        ),
    },
    "Viral Video Concepts": {
        "Transformation Journey": (
            "Time-lapse video showing dramatic transformation using [PRODUCT/SERVICE]. Start "
            "with 'before' state, show process, end with amazing results."
        ),
        "Behind-the-Scenes Magic": (
            "Authentic behind-the-scenes footage showing how [PRODUCT/SERVICE] is created. "
            "Include 'wow' moments and expertise in action."
        ),
        "Customer Success Story": (
            "Real customer testimonial in documentary-style format. Show initial problem, "
            "solution discovery, and amazing results."
        ),
        "Educational Hook": (
            "Educational content: \"What [INDUSTRY] doesn't want you to know about [TOPIC].\" "
            "Share insights while positioning as solution."
        ),
        "Trending Challenge": (
            "Adapt current trending video format to showcase [PRODUCT/SERVICE]. Include popular "
            "music and trending effects."
        ),
    },
    "Viral Content Ideas": {
        "Drama & Controversy": (
            "What are 10 opinions that people argue about when it comes to [INSERT PRODUCT/SERVICE]."
        ),
        "Curiosity Generator": "What are people wondering about before buying [INSERT PRODUCT/SERVICE].",
        "Trending Topics": "Give me 10 currently trending talking points about [INSERT PRODUCT/SERVICE]",
        "Expert Tips": (
            "Give me 10 tips about [INSERT PRODUCT/SERVICE] that [SPECIFIC AUDIENCE] probably "
            "doesn't know but would appreciate."
        ),
        "Contrarian Take": "[INSERT UNPOPULAR OPINION], give me 10 reasons why that's wrong.",
    },
}

# (day, theme, content, post ideas, optimal time, hashtags)
WEEKLY_CONTENT_THEMES = (
    (
        "Monday",
        "Motivation Monday",
        "Inspirational content and success stories for {audience} using {business}",
        (
            "Success story: How {audience} transformed their results with {business}",
            "Monday motivation: Why {audience} choose {business} for success",
            "Weekly goal: What {audience} can achieve this week with {business}",
        ),
        "8:00 AM",
        ("#MotivationMonday", "#Success", "#Transformation"),
    ),
    (
        "Tuesday",
        "Tips Tuesday",
        "Educational content and industry insights for {audience}",
        (
            "5 tips {audience} needs to know about {business}",
            "Common mistakes {audience} makes (and how to fix them)",
            "Expert advice: How {business} solves {audience} problems",
        ),
        "9:00 AM",
        ("#TipsTuesday", "#Education", "#Expert"),
    ),
    (
        "Wednesday",
        "Wisdom Wednesday",
        "Expert advice and problem-solving for {audience}",
        (
            "Industry secrets {audience} should know about {business}",
            "Q&A: Top questions {audience} asks about {business}",
            "Behind-the-scenes: How we help {audience} succeed",
        ),
        "11:00 AM",
        ("#WisdomWednesday", "#Insights", "#QandA"),
    ),
    (
        "Thursday",
        "Throwback Thursday",
        "Case studies and testimonials from {audience}",
        (
            "Case study: {audience} success story with {business}",
            "Before & after: {audience} transformation",
            "Testimonial Thursday: What {audience} says about {business}",
        ),
        "2:00 PM",
        ("#ThrowbackThursday", "#CaseStudy", "#Testimonial"),
    ),
    (
        "Friday",
        "Feature Friday",
        "Product/service highlights and demos for {audience}",
        (
            "Feature spotlight: How {business} helps {audience}",
            "Demo Friday: {business} in action for {audience}",
            "Weekend prep: How {audience} can use {business}",
        ),
        "3:00 PM",
        ("#FeatureFriday", "#Demo", "#ProductSpotlight"),
    ),
    (
        "Saturday",
        "Success Saturday",
        "Customer wins and social proof from {audience}",
        (
            "Success Saturday: {audience} celebrating wins with {business}",
            "Weekend wins: How {business} helps {audience} succeed",
            "Community spotlight: Amazing {audience} using {business}",
        ),
        "12:00 PM",
        ("#SuccessSaturday", "#CustomerWins", "#Community"),
    ),
    (
        "Sunday",
        "Sunday Stories",
        "Behind-the-scenes and personal touch for {audience}",
        (
            "Sunday story: Why we created {business} for {audience}",
            "Behind-the-scenes: Our mission to help {audience}",
            "Sunday reflection: Impact we've made for {audience}",
        ),
        "1:00 PM",
        ("#SundayStories", "#BehindTheScenes", "#Mission"),
    ),
)

_WEEKDAYS = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday")
_WEEKEND = ("Saturday", "Sunday")


def _day_table(weekday_times: List[str], friday_times: List[str], weekend_times: List[str]) -> Dict[str, List[str]]:
    table = {day: list(weekday_times) for day in _WEEKDAYS}
    table["Friday"] = list(friday_times)
    table.update({day: list(weekend_times) for day in _WEEKEND})
    return table


# platform -> audience -> day -> posting times
OPTIMAL_POSTING_TIMES = {
    "Facebook": {
        "business-owners": _day_table(["9:00 AM", "3:00 PM"], ["9:00 AM", "1:00 PM"], ["12:00 PM", "2:00 PM"]),
        "consumers": _day_table(["1:00 PM", "8:00 PM"], ["1:00 PM", "8:00 PM"], ["12:00 PM", "6:00 PM"]),
    },
    "Instagram": {
        "business-owners": _day_table(
            ["6:00 AM", "12:00 PM", "7:00 PM"],
            ["6:00 AM", "12:00 PM", "5:00 PM"],
            ["10:00 AM", "2:00 PM"]
        ),
    },
}

DEFAULT_PLATFORM = "Facebook"
DEFAULT_AUDIENCE = "business-owners"
DEFAULT_TIMEZONE = "US/Central"

ENGAGEMENT_INSIGHTS = {
    "peak_days": ["Tuesday", "Wednesday", "Thursday"],
    "avoid_times": ["Before 6 AM", "After 10 PM"],
    "best_performers": [
        "Educational content on Tuesday",
        "Behind-the-scenes on Friday",
        "User-generated content on weekends",
    ],
}


def generate_prompts(
    prompt_type: Optional[str],
    business: str,
    audience: str,
    content_goal: Optional[str] = None,
    style: Optional[str] = None,
    context: Optional[str] = None
) -> Dict[str, Any]:
    """
    Fill a prompt family for a business and audience.

    Args:
        prompt_type: "high-end-image", "viral-video" or "billy-gene-ads".
            Unknown or missing types use the high-end image family.
        business: Product or service name.
        audience: Target audience.
        content_goal: Goal recorded in ``generatedFor``.
        style: Tone of voice used by ad copy prompts.
        context: Description of the product or service used by ad prompts.

    Returns:
        The prompts, the requested type and what they were generated for.
    """
    family = PROMPT_FAMILIES.get(prompt_type or HIGH_END_IMAGE, PROMPT_FAMILIES[HIGH_END_IMAGE])
    values = {
        "business": business,
        "audience": audience,
        "style": style or DEFAULT_PROMPT_STYLE,
        "context": context or DEFAULT_PROMPT_CONTEXT,
    }

    return {
        "prompts": [template.format(**values) for template in family],
        "promptType": prompt_type,
        "generatedFor": {
            "business": business,
            "audience": audience,
            "contentGoal": content_goal,
            "style": style,
        },
    }


def prompt_template_library() -> Dict[str, Any]:
    """Return the prompt template library and its template count."""
    return {
        "templates": {category: dict(entries) for category, entries in PROMPT_TEMPLATE_LIBRARY.items()},
        "totalTemplates": sum(len(entries) for entries in PROMPT_TEMPLATE_LIBRARY.values()),
    }


def build_weekly_content_calendar(business: str, audience: str, weeks: int = 1) -> List[Dict[str, Any]]:
    """
    Build a seven-day content calendar repeated for a number of weeks.

    Args:
        business: Product or service name.
        audience: Target audience.
        weeks: Number of weeks to plan.

    Returns:
        One entry per day with theme, content, three post ideas, optimal
        time, hashtags, week number, business and audience.

    Raises:
        ValueError: If weeks is less than 1.
    """
    if weeks < 1:
        raise ValueError("weeks must be at least 1")

    calendar = []
    for week in range(1, weeks + 1):
        for day, theme, content, post_ideas, optimal_time, hashtags in WEEKLY_CONTENT_THEMES:
            calendar.append({
                "day": day,
                "theme": theme,
                "content": content.format(business=business, audience=audience),
                "postIdeas": [idea.format(business=business, audience=audience) for idea in post_ideas],
                "optimalTime": optimal_time,
                "hashtags": list(hashtags),
                "week": week,
                "business": business,
                "audience": audience,
            })
    return calendar


def get_optimal_posting_times(
    platform: Optional[str] = None,
    audience: Optional[str] = None,
    timezone: Optional[str] = None
) -> Dict[str, Any]:
    """
    Look up posting times per weekday for a platform and audience.

    Unknown platforms use Facebook and unknown audiences use business owners.
    The requested values are echoed back unchanged.
    """
    platform_times = OPTIMAL_POSTING_TIMES.get(platform, OPTIMAL_POSTING_TIMES[DEFAULT_PLATFORM])
    audience_times = platform_times.get(audience, platform_times[DEFAULT_AUDIENCE])

    return {
        "platform": platform,
        "audience": audience,
        "timezone": timezone or DEFAULT_TIMEZONE,
        "optimal_times": {day: list(times) for day, times in audience_times.items()},
        "engagement_insights": {key: list(values) for key, values in ENGAGEMENT_INSIGHTS.items()},
    }


class ContentPlugin:
    """
    Plugin for prompt and content requests.

    Chooses a template family from phrases in the message; explicit image
    and calendar phrases outrank the generic "generate" keyword.
    """

    def __init__(self, context: AgentContext):
        """
        Initialize the content plugin.

        Args:
            context: Agent context with request state and dependencies.
        """
        self._context = context
        self._logger = context.logger or logging.getLogger(__name__)

    async def handle(self, intent: Intent, message: str) -> Union[str, Dict[str, Any]]:
        """
        Generate content for a request.

        Args:
            intent: Classified intent.
            message: The user's message.

        Returns:
            Image prompts or a content calendar as a structured payload, or a
            clarifying question.
        """
        lowered = (message or "").lower()
        business_context = self._context.business_context
        business = business_context or DEFAULT_BUSINESS_CONTEXT

        if any(phrase in lowered for phrase in IMAGE_PROMPT_PHRASES):
            return self._image_prompts(business_context)

        if any(phrase in lowered for phrase in CALENDAR_PHRASES):
            self._logger.info(f"Building content calendar for {business}")
            return {
                "response": f"Here's your weekly content calendar for {business}:",
                "calendar": build_content_calendar(business_context),
            }

        if GENERATE_KEYWORD in lowered:
            return self._image_prompts(business_context)

        return CONTENT_CLARIFICATION

    def _image_prompts(self, business_context: Optional[str]) -> Dict[str, Any]:
        business = business_context or DEFAULT_BUSINESS_CONTEXT
        self._logger.info(f"Building image prompts for {business}")
        return {
            "response": f"Here are 5 professional high-end image prompts for {business}:",
            "prompts": build_image_prompts(business_context),
            "promptType": HIGH_END_IMAGE,
        }
