"""
FileScope Classifier Prompt Templates

Render a static analysis report into the prompt consumed by the external
threat classifier.
"""

from typing import List

from filescope.models.static_analysis import StaticAnalysisReport
from filescope.utils.constants import (
    CLASSIFIER_TEXT_PREVIEW_CHARS,
    CLASSIFIER_TOP_KEYWORDS,
    HIGH_ENTROPY_THRESHOLD,
)


SYSTEM_PROMPT = """You are a world-class cybersecurity threat intelligence analyst. Your task is to analyze static file analysis reports and provide a comprehensive threat assessment in a structured JSON format.

Always respond with a single valid JSON object matching the requested structure."""


OUTPUT_STRUCTURE = """1.  **prediction**: Classify the file as 'Safe', 'Suspicious', or 'Malicious'.
2.  **riskScore**: Assign a numerical risk score from 0 (Safe) to 100 (Critical).
3.  **summary**: A concise, one-sentence executive summary of the findings.
4.  **iocs**: An array of "Indicators of Compromise". Include the file hash and any extracted URLs/IPs. For URLs/IPs, add a 'reputation' field noting if they are potentially malicious or unknown.
5.  **threats**: An array of strings describing the specific potential threats or malicious capabilities identified.
6.  **recommendations**: An array of actionable steps for the user (e.g., "Do not execute this file.").
7.  **simulatedBehavior**: An array of strings describing the likely actions the file would take if executed. This is a simulation based on the static data.
8.  **attackTactics**: An array of objects mapping the behavior to the MITRE ATT&CK framework, each with 'id', 'name' and a brief 'description'."""


def build_classifier_prompt(
    report: StaticAnalysisReport,
    high_entropy_threshold: float = HIGH_ENTROPY_THRESHOLD,
    text_preview_chars: int = CLASSIFIER_TEXT_PREVIEW_CHARS,
) -> str:
    """
    Build the classifier prompt for one report.

    Args:
        report: Completed static analysis report
        high_entropy_threshold: Entropy above which packing is called out
        text_preview_chars: Maximum script characters included

    Returns:
        Formatted prompt string
    """
    info = report.file_info

    prompt = f"""**File Static Analysis Report:**
- **File Name:** "{info.name}"
- **File Size:** {info.size} bytes
- **File Type:** "{info.type or 'unknown'}"
- **SHA-256 Hash:** {report.hashes.sha256}
- **Entropy:** {report.entropy:.4f}

**Key Observations:**
"""
    observations = format_observations(report, high_entropy_threshold, text_preview_chars)
    prompt += '\n'.join(observations) if observations else "- No notable static indicators."

    prompt += f"""

**Your Task:**
Based on all the information provided, perform a deep analysis and return a single JSON object.

**JSON Output Structure:**
{OUTPUT_STRUCTURE}
"""
    return prompt


def format_observations(
    report: StaticAnalysisReport,
    high_entropy_threshold: float = HIGH_ENTROPY_THRESHOLD,
    text_preview_chars: int = CLASSIFIER_TEXT_PREVIEW_CHARS,
) -> List[str]:
    """Format the notable findings of a report as prompt bullet points."""
    lines = []

    if report.entropy > high_entropy_threshold:
        lines.append(
            "- **High Entropy Detected:** This high entropy is a strong indicator of packed, "
            "compressed, or encrypted data, a common malware evasion technique."
        )

    if report.suspicious_keywords:
        top = ', '.join(hit.keyword for hit in report.suspicious_keywords[:CLASSIFIER_TOP_KEYWORDS])
        lines.append(
            f"- **Suspicious Keywords Found:** The file contains strings like [{top}], which are "
            f"associated with malicious capabilities such as process injection, network "
            f"communication, or system manipulation."
        )

    if report.extracted_urls:
        lines.append(
            f"- **Network Indicators Found:** The file contains the following URLs/IPs: "
            f"[{', '.join(report.extracted_urls)}]. These should be treated as potential "
            f"Indicators of Compromise (IOCs)."
        )

    if report.archive_contents is not None:
        lines.append(
            f"- **Archive Analysis:** This is an archive containing: "
            f"[{', '.join(report.archive_contents)}]. The contents should be evaluated as a "
            f"whole for malicious intent."
        )

    if report.text_content:
        lines.append(
            f"- **Script Content Analysis:** The following script content was extracted. "
            f"Analyze it for obfuscation, malicious commands, or vulnerabilities:\n"
            f"---\n{report.text_content[:text_preview_chars]}\n---"
        )

    return lines
