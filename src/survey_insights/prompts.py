"""Message templates for the two-step analysis chain.

The SURVEY STATISTICS block in the analysis template is the format that
insights.extract_statistics parses; keep the two in sync.
"""

from __future__ import annotations

from .llm.client import Message

ANALYSIS_SYSTEM = (
    "You are an expert business analyst specializing in customer feedback analysis. "
    "Analyze survey responses and report comprehensive statistical insights."
)

ANALYSIS_HUMAN = """Analyze the following survey responses:

{survey_text}

Report your analysis in exactly this structure:

## SURVEY STATISTICS
- Total Responses: [count]
- Positive Sentiment: [count] ([percentage]%)
- Negative Sentiment: [count] ([percentage]%)
- Neutral Sentiment: [count] ([percentage]%)

## TOPIC BREAKDOWN
One line per topic with its count:
- [Topic]: [count] responses

## PRIORITY ANALYSIS
- High Priority Issues: [count]
- Medium Priority Issues: [count]
- Low Priority Issues: [count]

## DETAILED RESPONSE ANALYSIS
For each response give the response text, its sentiment (positive/negative/neutral),
main topic, priority (high/medium/low) and a one-line key insight.

## KEY FINDINGS
- Most common topic: [topic] ([count] mentions)
- Most critical issue: [description]
- Most positive aspect: [description]
- Overall sentiment trend: [description]"""

RECOMMENDATION_SYSTEM = (
    "You are a strategic business consultant. "
    "Given analyzed survey data with statistics, write actionable recommendations."
)

RECOMMENDATION_HUMAN = """Survey analysis:

{analysis}

Write a strategic recommendation that:
- cites specific statistics and counts from the analysis
- addresses the most common issues first, by count or percentage
- prioritizes actions by frequency and impact
- gives concrete steps with timelines
- uses executive-friendly language
- includes data-driven statements such as "X% of customers mentioned Y\""""


def analysis_messages(survey_text: str) -> list[Message]:
    return [
        {"role": "system", "content": ANALYSIS_SYSTEM},
        {"role": "user", "content": ANALYSIS_HUMAN.format(survey_text=survey_text)},
    ]


def recommendation_messages(analysis: str) -> list[Message]:
    return [
        {"role": "system", "content": RECOMMENDATION_SYSTEM},
        {"role": "user", "content": RECOMMENDATION_HUMAN.format(analysis=analysis)},
    ]
