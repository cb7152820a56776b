# wraps the user's request in the instruction block every provider receives

GUIDELINES = """Follow these guidelines:
1. Respond ONLY with the Mermaid code block, no explanations or markdown formatting
2. Ensure the syntax is valid for Mermaid.js
3. Use appropriate diagram type (flowchart, sequence, class, etc.) based on the request
4. Keep the diagram clean and readable
5. Use meaningful labels and descriptions
6. Do not include ```mermaid or ``` tags"""

EXAMPLE = """Example of good response format:
graph TD
    A[Client] -->|TCP/IP| B(Load Balancer)
    B -->|HTTP| C[Web Server]
    C -->|Query| D[Database]"""


def build_prompt(text: str) -> str:
    return (
        f"Generate valid Mermaid.js code for: {text}.\n\n"
        f"{GUIDELINES}\n\n"
        f"{EXAMPLE}"
    )
