"""Text generation, chat and embedding tools."""

from __future__ import annotations

from typing import Literal

from pydantic import Field

from ...core.ollama_client import OllamaClient
from ...core.types import ToolOutcome
from ..registry import ToolArguments, catalog_tool
from .utils import format_sample, text_result, truncate

GENERATE_SUFFIX = "\n\nPlease provide a clear, concise response."

CODE_PROMPT_TEMPLATE = (
    "Generate {language} code for the following task:\n\n{task}\n\n"
    "Provide clean, well-commented code that follows best practices:"
)
CODE_MAX_TOKENS = 2048

SummaryLength = Literal["brief", "medium", "detailed"]

SUMMARY_INSTRUCTIONS: dict[str, str] = {
    "brief": "Provide a very brief summary in 1-2 sentences.",
    "medium": "Provide a concise summary in 2-4 sentences.",
    "detailed": "Provide a detailed summary covering all key points.",
}
SUMMARY_PROMPT_TEMPLATE = (
    "Please summarise the following text. {instruction}\n\n"
    "Text to summarise:\n{text}\n\nSummary:"
)
SUMMARY_TEMPERATURE = 0.3


class GenerateTextArguments(ToolArguments):
    model: str = Field("llama3.2", description="Ollama model name (e.g., llama3.2, qwen2.5)")
    prompt: str = Field(..., min_length=1, description="Text prompt for generation")
    temperature: float = Field(0.7, ge=0.0, le=2.0, description="Sampling temperature (0.0-2.0)")
    max_tokens: int = Field(2048, gt=0, description="Maximum tokens to generate")


@catalog_tool(
    "generate_text",
    description=(
        "Generate text using a local Ollama model for simple tasks like basic writing, "
        "simple summaries, or straightforward content creation"
    ),
    arguments=GenerateTextArguments,
)
async def generate_text(client: OllamaClient, args: GenerateTextArguments) -> ToolOutcome:
    result = await client.generate_text(
        args.model,
        f"{args.prompt}{GENERATE_SUFFIX}",
        {"temperature": args.temperature, "num_predict": args.max_tokens},
    )
    text = result.unwrap()
    return text_result(f"**Model:** {args.model}\n**Generated Text:**\n\n{text}")


class ChatTurn(ToolArguments):
    role: Literal["system", "user", "assistant"]
    content: str


class ChatArguments(ToolArguments):
    model: str = Field("llama3.2", description="Ollama model name")
    messages: list[ChatTurn] = Field(
        ..., min_length=1, description="Array of chat messages with role and content"
    )
    temperature: float = Field(0.7, ge=0.0, le=2.0, description="Sampling temperature (0.0-2.0)")


@catalog_tool(
    "chat",
    description=(
        "Have a conversation with a local Ollama model, useful for Q&A, explanations, "
        "or dialogue-based tasks"
    ),
    arguments=ChatArguments,
)
async def chat(client: OllamaClient, args: ChatArguments) -> ToolOutcome:
    result = await client.chat_completion(
        args.model,
        [turn.model_dump() for turn in args.messages],
        {"temperature": args.temperature},
    )
    reply = result.unwrap()
    return text_result(f"**Model:** {args.model}\n**Response:**\n\n{reply}")


class EmbedTextArguments(ToolArguments):
    model: str = Field("nomic-embed-text", description="Embedding model name")
    text: str = Field(..., min_length=1, description="Text to embed")


@catalog_tool(
    "embed_text",
    description="Generate text embeddings using local embedding models like nomic-embed-text",
    arguments=EmbedTextArguments,
)
async def embed_text(client: OllamaClient, args: EmbedTextArguments) -> ToolOutcome:
    result = await client.generate_embedding(args.model, args.text)
    embedding = result.unwrap()
    return text_result(
        f"**Model:** {args.model}\n"
        f"**Text:** {truncate(args.text)}\n"
        f"**Embedding Vector:** [{len(embedding)} dimensions]\n"
        f"**Sample Values:** {format_sample(embedding)}"
    )


class CodeGenerationArguments(ToolArguments):
    model: str = Field("deepseek-coder", description="Coding model name")
    task: str = Field(..., min_length=1, description="Coding task description")
    language: str = Field("python", min_length=1, description="Programming language")
    temperature: float = Field(0.2, ge=0.0, le=2.0, description="Sampling temperature (0.0-2.0)")


@catalog_tool(
    "code_generation",
    description="Generate code using specialised coding models like deepseek-coder",
    arguments=CodeGenerationArguments,
)
async def code_generation(client: OllamaClient, args: CodeGenerationArguments) -> ToolOutcome:
    prompt = CODE_PROMPT_TEMPLATE.format(language=args.language, task=args.task)
    result = await client.generate_text(
        args.model,
        prompt,
        {"temperature": args.temperature, "num_predict": CODE_MAX_TOKENS},
    )
    code = result.unwrap()
    return text_result(
        f"**Model:** {args.model}\n"
        f"**Language:** {args.language}\n"
        f"**Task:** {args.task}\n\n"
        f"**Generated Code:**\n\n```{args.language}\n{code}\n```"
    )


class SummariseArguments(ToolArguments):
    model: str = Field("llama3.2", description="Ollama model name")
    text: str = Field(..., min_length=1, description="Text to summarise")
    length: SummaryLength = Field("medium", description="Summary length preference")


@catalog_tool(
    "summarise",
    description="Summarise text content using local models for basic summarisation tasks",
    arguments=SummariseArguments,
)
async def summarise(client: OllamaClient, args: SummariseArguments) -> ToolOutcome:
    prompt = SUMMARY_PROMPT_TEMPLATE.format(
        instruction=SUMMARY_INSTRUCTIONS[args.length], text=args.text
    )
    result = await client.generate_text(
        args.model, prompt, {"temperature": SUMMARY_TEMPERATURE}
    )
    summary = result.unwrap()
    return text_result(
        f"**Model:** {args.model}\n"
        f"**Length:** {args.length}\n"
        f"**Original Length:** {len(args.text)} characters\n\n"
        f"**Summary:**\n\n{summary}"
    )
