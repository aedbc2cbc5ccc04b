"""Prompt construction for prospect reports.

:func:`build_prompt` renders one instruction string from a
:class:`ProspectInput`.  It is pure: the same input always yields the same
prompt.  Input validation is the caller's job.
"""

from __future__ import annotations

from prospect_agent.domain.values import ProspectInput

NO_KEYWORDS_PLACEHOLDER = "None"

# -- Template sections ---------------------------------------------------------

_ROLE = (
    "You are an intelligent sales prospecting agent for a company providing "
    "modern inventory & order management software. Your goal is to identify "
    "high-potential prospects for OMS/IMS solutions among retailers and B2B "
    "companies with $1B+ revenue, profitability, and at least 50 store "
    "locations in North America."
)

_INSTRUCTIONS = (
    "Based on the following query and your comprehensive knowledge, including "
    "up-to-date information from Google Search, generate a detailed prospect "
    "report. Focus on identifying specific indicators and actionable insights."
)

BUYING_SIGNALS: tuple[str, ...] = (
    "Recent investments in omnichannel technology.",
    "Supply chain challenges or digital transformations.",
    "Executive discussions on OMS/IMS build vs. buy.",
    'Job postings with keywords like "IBM Sterling OMS", "Order Management '
    'System", "Manhattan", "Fluent", "Kibo".',
    "New executive appointments (especially leaders with experience at "
    "companies known for modern supply chains).",
    "Cloud migrations to AWS, Azure, or Google Cloud.",
    "Financial reports mentioning AI, omnichannel, digital transformation "
    "investments.",
    "Industry event speakers in supply chain/operations/tech roles at major "
    "retail conferences.",
)

WEBSITE_CAPABILITIES: tuple[str, ...] = (
    "Evaluate presence of expected delivery dates, BOPIS, same-day delivery.",
    'Look for "low in stock" alerts, pre-orders, ship-from-store.',
)

REPORT_SECTIONS: tuple[str, ...] = (
    "Prioritized Target Companies",
    "Key Decision-Makers",
    "Customized Outreach Content",
    "Supporting Insights",
)

_CRITERIA = "Ensure company meets $1B+ revenue, profitability, and 50+ stores criterion."

_COMPANY_LINE = (
    "- **[Company Name {n}]**: [Brief summary of why they are a good prospect, "
    "linking to buying signals and the value proposition for their specific "
    "needs. " + _CRITERIA + "]"
)

_DECISION_MAKER_LINE = (
    "- **[Decision Maker Name {n}]** ([Title at Company 1]): [Relevant LinkedIn "
    "connection insight, if applicable, or typical responsibilities related to "
    "OMS/IMS. Potential areas of interest for a modern OMS/IMS provider.]"
)

_EMAIL_DRAFT = """\
**Email Draft for [Target Company 1, e.g., "XYZ Retail"]:**
Subject: Enhancing Order and Inventory Management for [Target Company 1 Name]

Dear [Decision Maker Name],

I've been closely following [Target Company 1 Name]'s recent [mention specific buying signal, e.g., "investments in omnichannel initiatives" or "discussions on supply chain resilience"]. It's clear that modern retail demands agility, and optimizing your inventory and order management systems is paramount.

We specialize in empowering companies like yours to overcome the challenges of fragmented inventory, proliferating order channels, and complex fulfillment. Our modern OMS/IMS solutions are designed for speed, scalability, and intelligence, helping you [mention specific benefits tailored to the company's identified gaps, e.g., "achieve seamless BOPIS, real-time inventory visibility, and faster delivery promises"].

I believe a brief discussion could reveal how our expertise aligns perfectly with your goals for [mention their specific focus, e.g., "improving customer experience through advanced fulfillment options"]. Would you be open to a quick chat next week?

Best regards,
[Your Name/Sales Team]

(Provide a similar draft for each target company.)"""

_SUPPORTING_INSIGHTS = (
    '- **Key Buying Signals Observed**: [List specific signals for each target '
    'company and their sources/context, e.g., "Recent news on \'Company X\' '
    'investing in omnichannel tech (source: Forbes article, YYYY-MM-DD)", '
    '"Job posting for \'Order Management Specialist\' at \'Company Z\' '
    '(source: LinkedIn, YYYY-MM-DD)"].\n'
    '- **Website Capability Gaps (simulated)**: [For each target company, '
    'detail observed gaps, e.g., "Company X\'s website lacks clear BOPIS '
    'options and only provides generic delivery estimates on product '
    'pages."].\n'
    "- **Financial/Operational Context**: [For each target company, provide "
    "relevant revenue, profitability, and store count information (cite "
    'sources or state "simulated based on public information").]'
)

_CLOSING = (
    "Remember to position the modern OMS/IMS solution as the key for companies "
    "struggling with legacy systems that can't handle today's need for speed, "
    "scalability, and intelligence in inventory and order management."
)


def _bullets(items: tuple[str, ...]) -> str:
    return "\n".join(f"- {item}" for item in items)


def report_heading(inputs: ProspectInput) -> str:
    """The level-2 heading the model is told to open its report with."""
    keywords = (inputs.additional_keywords or "").strip()
    heading = (
        f"## Prospect Report for {inputs.company_or_industry} "
        f"focusing on {inputs.focus_area}"
    )
    if keywords:
        heading += f" (Context: {keywords})"
    return heading


def build_prompt(inputs: ProspectInput) -> str:
    """Render the full instruction prompt for *inputs*.

    The company, focus area, and keywords are embedded verbatim.  Blank
    keywords become the literal ``None`` in the query line and drop the
    ``(Context: ...)`` suffix from the heading.
    """
    keywords = (inputs.additional_keywords or "").strip()
    company = inputs.company_or_industry
    focus = inputs.focus_area

    parts = [
        _ROLE,
        _INSTRUCTIONS,
        (
            f'**User Query:** Identify prospects related to "{company}" with a '
            f'focus on "{focus}". Additional context: '
            f'"{keywords or NO_KEYWORDS_PLACEHOLDER}".'
        ),
        (
            "**Key Buying Signals to Prioritize (incorporate latest info from "
            "news, financial reports, job postings, etc.):**\n"
            + _bullets(BUYING_SIGNALS)
        ),
        (
            "**Retailer Website Capability Analysis (simulate assessment based "
            "on public info):**\n" + _bullets(WEBSITE_CAPABILITIES)
        ),
        "**Output Format (Strictly use Markdown headings and bullet points):**",
        report_heading(inputs),
        (
            f"### 1. {REPORT_SECTIONS[0]}\n"
            + _COMPANY_LINE.format(n=1) + "\n"
            + _COMPANY_LINE.format(n=2) + "\n"
            "...\n"
            "(Provide at least 2-3 highly relevant companies if possible.)"
        ),
        (
            f"### 2. {REPORT_SECTIONS[1]}\n"
            + _DECISION_MAKER_LINE.format(n=1) + "\n"
            + _DECISION_MAKER_LINE.format(n=2) + "\n"
            "...\n"
            "(Identify 1-2 key decision-makers per target company.)"
        ),
        f"### 3. {REPORT_SECTIONS[2]}\n" + _EMAIL_DRAFT,
        f"### 4. {REPORT_SECTIONS[3]}\n" + _SUPPORTING_INSIGHTS,
        _CLOSING,
    ]
    return "\n\n".join(parts) + "\n"
