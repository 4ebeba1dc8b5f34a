"""
k6-modern-report - Self-contained HTML reports for k6 load-test summaries

Turns the summary object k6 passes to handleSummary into a single static
HTML document with overview cards, detailed metrics, checks, thresholds and
free-form test information.

Features:
- Request success/error split and response time breakdown
- Detailed HTTP timing table (avg/min/med/max/p90/p95)
- Checks grouped by k6 group, threshold pass/fail results
- Overall PASS/FAIL status from requests, checks and thresholds
- Escaped output, no external data beyond the icon stylesheet
"""

from setuptools import setup, find_packages
from pathlib import Path

# Read README for long description
readme_file = Path(__file__).parent / "README.md"
long_description = readme_file.read_text() if readme_file.exists() else __doc__

setup(
    name="k6-modern-report",
    version="1.0.0",
    description="Self-contained HTML reports for k6 load-test summaries",
    long_description=long_description,
    long_description_content_type="text/markdown",
    python_requires=">=3.11",
    packages=find_packages(exclude=["tests", "*.tests", "*.tests.*", "tests.*"]),
    install_requires=[
        "numpy>=1.20.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "k6-modern-report=k6_modern_report.cli:main",
        ],
    },
    classifiers=[
        "Development Status :: 5 - Production/Stable",
        "Intended Audience :: Developers",
        "Topic :: Software Development :: Testing",
        "Topic :: Software Development :: Quality Assurance",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
    keywords="k6 load testing performance report html",
)
