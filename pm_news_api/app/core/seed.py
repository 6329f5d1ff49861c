"""
Fixture content loaded into the store at start‑up.

News items are published relative to the moment the store is built
(two hours ago, four hours ago and so on) so the feed always looks
fresh.  Their ``createdAt`` equals ``publishedAt``; PM resources are
created "now".
"""

from datetime import datetime, timedelta
from typing import List

from ..schemas.news import NewsItemCreate
from ..schemas.pm_resource import PmResourceCreate

_HOUR = timedelta(hours=1)
_DAY = timedelta(days=1)


def seed_news_items(now: datetime) -> List[NewsItemCreate]:
    return [
        NewsItemCreate(
            title="OpenAI Announces GPT-5 with Revolutionary Reasoning Capabilities",
            description=(
                "The latest model shows unprecedented advances in logical reasoning and multi-step "
                "problem solving, setting new benchmarks across multiple domains."
            ),
            content=(
                "OpenAI has unveiled GPT-5, their most advanced language model yet, featuring "
                "breakthrough capabilities in logical reasoning, mathematical problem-solving, and "
                "multi-step analysis."
            ),
            image_url="https://images.unsplash.com/photo-1677442136019-21780ecad995?auto=format&fit=crop&w=800&h=400",
            source_url="https://openai.com/blog/gpt-5-announcement",
            company="OpenAI",
            implementation_type="Released",
            relevance_categories=["Coding", "Education", "Research"],
            industry="Technology",
            technology="Large Language Models",
            gravity_score=95,
            is_breakthrough=True,
            published_at=now - 2 * _HOUR,
        ),
        NewsItemCreate(
            title="Google's Gemini Ultra Achieves Human-Level Performance on Complex Tasks",
            description=(
                "New benchmarks show AI systems reaching human parity in multiple cognitive domains, "
                "revolutionizing how we approach problem-solving."
            ),
            content=(
                "Google's Gemini Ultra matches or exceeds human performance across reasoning, "
                "creativity and complex problem-solving evaluations."
            ),
            image_url="https://images.unsplash.com/photo-1677442136019-21780ecad995?auto=format&fit=crop&w=800&h=400",
            source_url="https://blog.google/technology/ai/gemini-ultra-benchmarks",
            company="Google",
            implementation_type="Research",
            relevance_categories=["Research", "Education"],
            industry="Technology",
            technology="Multimodal AI",
            gravity_score=88,
            is_breakthrough=True,
            published_at=now - 4 * _HOUR,
        ),
        NewsItemCreate(
            title="Microsoft Copilot Integration Transforms Enterprise Productivity",
            description=(
                "Early adopters report 40% increase in productivity with AI-powered workplace tools "
                "across Office 365 and Teams platforms."
            ),
            content=(
                "Companies report substantial improvements in document creation, data analysis and "
                "collaborative workflows after rolling out Copilot."
            ),
            image_url="https://images.unsplash.com/photo-1611974789855-9c2a0a7236a3?auto=format&fit=crop&w=800&h=400",
            source_url="https://news.microsoft.com/copilot-enterprise-productivity",
            company="Microsoft",
            implementation_type="Released",
            relevance_categories=["Enterprise", "Productivity"],
            industry="Technology",
            technology="AI Assistants",
            gravity_score=82,
            is_breakthrough=True,
            published_at=now - 6 * _HOUR,
        ),
        NewsItemCreate(
            title="Claude 3 Achieves New Benchmarks in Constitutional AI Safety",
            description=(
                "Anthropic's latest model demonstrates significant improvements in AI alignment and "
                "safety protocols."
            ),
            content=(
                "Claude 3 incorporates constitutional AI principles for more reliable and aligned "
                "behavior across a wide range of applications."
            ),
            image_url="https://images.unsplash.com/photo-1677442136019-21780ecad995?auto=format&fit=crop&w=800&h=400",
            source_url="https://www.anthropic.com/claude-3-safety",
            company="Anthropic",
            implementation_type="Released",
            relevance_categories=["Safety", "Research"],
            industry="Technology",
            technology="Constitutional AI",
            gravity_score=75,
            is_breakthrough=False,
            published_at=now - _DAY,
        ),
        NewsItemCreate(
            title="AlphaFold 3 Predicts Protein Structures for Drug Discovery",
            description=(
                "DeepMind's enhanced protein folding AI accelerates pharmaceutical research with "
                "unprecedented accuracy in molecular prediction."
            ),
            content=(
                "AlphaFold 3 provides researchers with accurate protein structure predictions that "
                "accelerate the development of new treatments."
            ),
            image_url="https://images.unsplash.com/photo-1559757148-5c350d0d3c56?auto=format&fit=crop&w=800&h=400",
            source_url="https://deepmind.com/alphafold-3-drug-discovery",
            company="DeepMind",
            implementation_type="Research",
            relevance_categories=["Healthcare", "Research"],
            industry="Biotechnology",
            technology="Protein Folding AI",
            gravity_score=85,
            is_breakthrough=False,
            published_at=now - 2 * _DAY,
        ),
        NewsItemCreate(
            title="GitHub Copilot X Introduces AI-Powered Code Reviews",
            description=(
                "The enhanced Copilot now offers intelligent code analysis, automated bug detection, "
                "and context-aware suggestions."
            ),
            content=(
                "Copilot X helps developers identify issues, optimize performance and keep security "
                "practices in place automatically."
            ),
            image_url="https://images.unsplash.com/photo-1555066931-4365d14bab8c?auto=format&fit=crop&w=800&h=400",
            source_url="https://github.blog/copilot-x-code-reviews",
            company="GitHub",
            implementation_type="Released",
            relevance_categories=["Coding", "DevTools"],
            industry="Technology",
            technology="Code Generation AI",
            gravity_score=72,
            is_breakthrough=False,
            published_at=now - 4 * _DAY,
        ),
    ]


def seed_pm_resources() -> List[PmResourceCreate]:
    return [
        PmResourceCreate(
            title="AI Product Discovery Framework",
            description=(
                "Comprehensive framework for identifying AI opportunities in existing products and "
                "discovering new AI-powered product possibilities."
            ),
            content=(
                "Market analysis, technical feasibility assessment and user need validation for AI "
                "products."
            ),
            resource_type="Framework",
            pm_stage="Discovery",
            tags=["AI Strategy", "Product Discovery", "Market Research"],
            difficulty="Intermediate",
            resource_url="https://example.com/ai-discovery-framework",
        ),
        PmResourceCreate(
            title="OpenAI Product Manager Interview Questions",
            description=(
                "Curated interview questions for Product Manager roles at OpenAI, including AI ethics "
                "and strategy questions."
            ),
            content="50+ questions on product strategy, AI ethics, technical understanding and leadership.",
            resource_type="Interview Questions",
            pm_stage="Discovery",
            company="OpenAI",
            tags=["Interview Prep", "OpenAI", "AI Ethics"],
            difficulty="Advanced",
            resource_url="https://example.com/openai-pm-interviews",
        ),
        PmResourceCreate(
            title="AI Product Planning Template",
            description=(
                "Ready-to-use template for planning AI product features, including model selection, "
                "data requirements, and performance metrics."
            ),
            content="Model selection, training data requirements, evaluation metrics and launch criteria.",
            resource_type="Template",
            pm_stage="Planning",
            tags=["Product Planning", "AI Models", "Metrics"],
            difficulty="Beginner",
            download_url="https://example.com/ai-planning-template.pdf",
        ),
        PmResourceCreate(
            title="ChatGPT Product Teardown",
            description="In-depth analysis of ChatGPT's product strategy, user experience, and monetization approach.",
            content="User journey, feature prioritization, pricing strategy and competitive positioning.",
            resource_type="Product Teardown",
            pm_stage="Discovery",
            company="OpenAI",
            tags=["Product Analysis", "ChatGPT", "UX Strategy"],
            difficulty="Intermediate",
            resource_url="https://example.com/chatgpt-teardown",
        ),
        PmResourceCreate(
            title="AI Product Launch Checklist",
            description=(
                "Essential checklist for launching AI products, including model validation, safety "
                "testing, and regulatory compliance."
            ),
            content="Technical validation, safety protocols, compliance requirements and go-to-market strategy.",
            resource_type="Template",
            pm_stage="Launch",
            tags=["Product Launch", "AI Safety", "Compliance"],
            difficulty="Advanced",
            download_url="https://example.com/ai-launch-checklist.pdf",
        ),
    ]
