"""Package setup for link_header."""

from setuptools import setup, find_packages

setup(
    name="link-header",
    version="0.1.0",
    description="Parser for HTTP Link header values (RFC 8288)",
    packages=find_packages(include=["link_header", "link_header.*"]),
    python_requires=">=3.10",
    install_requires=[
        "requests>=2.31.0",
        "urllib3>=2.0.0",
        "colorlog>=6.8.0",
    ],
)
