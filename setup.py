from setuptools import setup, find_packages

setup(
    name="youtube_captions",
    version="0.1.0",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    install_requires=[
        "fastapi>=0.110.0",
        "uvicorn>=0.27.0",
        "pydantic>=2.0",
        "youtube-transcript-api>=1.0.0",
        "yt-dlp>=2024.1.0",
        "pydub>=0.25.1",
        "audioop-lts; python_version>='3.13'",
        "openai>=1.0.0",
        "groq>=0.4.0",
        "requests>=2.31.0",
        "colorlog>=6.8.0",
        "python-dotenv>=1.0.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.4.0,<9.1",
            "pytest-asyncio>=0.21.0",
            "pytest-cov>=4.1.0",
            "httpx>=0.25.0",
        ],
    },
    python_requires=">=3.9",
    description="YouTube transcript service with speech-recognition fallback",
)
