from ragchat.generation.openai_chat_stream import OpenAIChatStreamGenerator
from ragchat.generation.types import GenerationOptions, GenerationStream, TextGenerator

__all__ = [
    "GenerationOptions",
    "GenerationStream",
    "OpenAIChatStreamGenerator",
    "TextGenerator",
]
