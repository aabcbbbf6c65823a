"""Trusted fact-checking domains and fact-check vocabulary used for scoring.

Entries are hosts (``snopes.com``) or host+path prefixes
(``reuters.com/fact-check``). Scoring compares a result's bare hostname
for exact membership, so path-prefixed entries only document the outlet's
fact-check section.
"""

TRUSTED_FACT_CHECK_DOMAINS: frozenset[str] = frozenset({
    # Core global fact-checkers (IFCN-verified)
    "factcheck.org",
    "politifact.com",
    "snopes.com",
    "reuters.com/fact-check",
    "apnews.com/hub/fact-checking",
    "bbc.com/news/reality_check",
    "fullfact.org",
    "factcheck.afp.com",
    "usatoday.com/fact-check",
    "washingtonpost.com/fact-checker",

    # Additional high-quality fact-checkers
    "leadstories.com",
    "sciencefeedback.co",
    "healthfeedback.org",
    "chequeado.com",
    "aosfatos.org",
    "africacheck.org",
    "boomlive.in",
    "altnews.in",
    "euvsdisinfo.eu",
    "ifcn.org",

    # Regional
    "flackcheck.org",
    "factcheckni.org",
    "theferret.scot",

    # Tools & aggregators
    "toolbox.google.com/factcheck",
    "archive.org",
})

FACT_CHECK_TERMS: tuple[str, ...] = (
    "fact check",
    "fact-check",
    "debunk",
    "verify",
    "false",
    "true",
    "myth",
    "claim",
)
