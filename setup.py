from setuptools import setup  # type: ignore

setup(
    name="coachlist",
    version="0.0.0",
    python_requires=">=3.11",
    packages=[
        "coachlist",
        "coachlist.api",
        "coachlist.api.endpoints",
        "coachlist.api.infra",
        "coachlist.application",
        "coachlist.application.waitlist",
        "coachlist.domain",
        "coachlist.domain.repo",
    ],
    install_requires=[
        "fastapi",
        "httpx",
        "python-dotenv",
        "python-multipart",
        "starlette",
        "uvicorn",
    ],
    extras_require={
        "test": [
            "pytest",
            "pytest-asyncio",
        ],
    },
)
