"""Upload, transcribe and diarize audio through AssemblyAI."""

__version__ = "0.1.0"
