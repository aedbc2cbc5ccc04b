"""Generate a prospect report against a scripted model, no API key needed.

The scripted port fails twice with an overload error before answering, so
the run shows the retry/backoff path end to end.

Run::

    python examples/01_offline_report.py
"""

from __future__ import annotations

import asyncio
import logging

from prospect_agent import ProspectInput, ProspectRequestOrchestrator
from prospect_agent.infrastructure.config import RetryConfig
from prospect_agent.infrastructure.credentials import StaticCredentialProvider
from prospect_agent.infrastructure.llm import ModelError, RawCitation, RawModelResponse
from prospect_agent.presentation.console import ReportConsole
from prospect_agent.testing import ScriptedModelPort

REPORT = """\
## Prospect Report for Target focusing on Cloud Migration

### 1. Prioritized Target Companies
- **Target**: Multi-year move of fulfillment workloads to the cloud; 1,900+ stores.

### 2. Key Decision-Makers
- **Jane Doe** (SVP Supply Chain Technology): owns order routing and inventory visibility.

### 3. Customized Outreach Content
**Email Draft for Target:** ...

### 4. Supporting Insights
- **Key Buying Signals Observed**: cloud migration announcement (source: press release).
"""


def main() -> None:
    logging.basicConfig(level=logging.WARNING, format="%(levelname)s %(message)s")

    port = ScriptedModelPort([
        ModelError("503 UNAVAILABLE. The model is overloaded.", status_code=503),
        ModelError("503 UNAVAILABLE. The model is overloaded.", status_code=503),
        RawModelResponse(
            text=REPORT,
            citations=(
                RawCitation(uri="https://corporate.target.com/press", title="Target press room"),
                RawCitation(uri=None, title="Untitled source"),
            ),
        ),
    ])
    orchestrator = ProspectRequestOrchestrator(
        port=port,
        credentials=StaticCredentialProvider("offline-demo"),
        retry_config=RetryConfig(initial_backoff=0.1),
    )

    inputs = ProspectInput.from_form("Target", "Cloud Migration")
    report = asyncio.run(orchestrator.generate_prospect_data(inputs))

    ReportConsole().print_report(report)
    print(f"Model calls: {port.call_count}")


if __name__ == "__main__":
    main()
