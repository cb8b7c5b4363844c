"""Setup file for development installation."""

from setuptools import setup, find_packages

setup(
    name="is-learning-chat",
    version="0.1.0",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    package_data={"is_learning_chat.ui": ["static/*.js"]},
    python_requires=">=3.9",
    install_requires=[
        "fastapi>=0.100",
        "pydantic>=2.0",
        "structlog>=23.1",
        "google-generativeai>=0.7",
        "google-api-core>=2.11",
        "httpx>=0.27",
        "prometheus-client>=0.17",
        "opentelemetry-instrumentation-fastapi>=0.41b0",
    ],
    extras_require={
        "test": [
            "pytest>=7.4",
            "pytest-asyncio>=0.23",
        ],
    },
)
