"""Shared fixtures."""

import copy

import pytest

from litreview.config import Settings

SAMPLE_RESULT = {
    "status": "completed",
    "metadata": {
        "total_papers": 2,
        "generated_date": "2026-10-19",
        "summary_statistics": {
            "year_range": "2019-2024",
            "research_themes": ["Transformers", "Retrieval", "Evaluation", "Fairness"],
            "methodologies": ["Survey", "Benchmark"],
        },
    },
    "markdown_output": "# Literature Review\n\nTwo papers were analysed.",
    "json_output": {
        "papers": [
            {
                "title": "Attention Is All You Need",
                "authors": ["Ashish Vaswani", "Noam Shazeer"],
                "year": 2017,
                "journal": "NeurIPS",
                "doi": "10.48550/arXiv.1706.03762",
                "url": "https://arxiv.org/abs/1706.03762",
                "abstract": "The dominant sequence transduction models...",
                "summary_150_words": "Introduces the Transformer.",
            },
            {
                "title": "Retrieval-Augmented Generation",
                "authors": ["Patrick Lewis"],
                "year": 2020,
                "journal": "NeurIPS",
                "doi": "",
                "url": "",
                "abstract": "",
                "summary_150_words": "Combines retrieval with generation.",
            },
        ],
        "comparative_analysis_table": [
            {
                "paper": "Vaswani et al.",
                "research_theme": "Transformers",
                "methodology": "Architecture",
                "key_findings": "Self-attention suffices",
                "research_gaps": "Long contexts",
                "year": 2017,
            },
        ],
    },
    "confidence": 0.92,
    "processing_notes": "ok",
    "Model": "gpt-4.1",
    "Temperature": 0.3,
}


@pytest.fixture
def sample_result() -> dict:
    return copy.deepcopy(SAMPLE_RESULT)


@pytest.fixture(autouse=True)
def _reset_settings():
    Settings.reset()
    yield
    Settings.reset()
