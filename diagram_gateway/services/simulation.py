# canned diagrams for offline testing of the client; never calls a provider

SSH_BASTION_DIAGRAM = """
sequenceDiagram
    participant User
    participant LocalMachine
    participant BastionHost
    participant TargetServer

    User->>LocalMachine: Generate SSH key pair
    Note over LocalMachine: Store private key locally
    LocalMachine->>BastionHost: Upload public key to authorized_keys
    LocalMachine->>TargetServer: Upload public key to authorized_keys

    User->>LocalMachine: ssh -i private_key user@bastion
    LocalMachine->>BastionHost: Authenticate with SSH key
    BastionHost->>LocalMachine: Authentication successful

    User->>BastionHost: ssh -i forwarded_key user@target
    BastionHost->>TargetServer: Authenticate with SSH key
    TargetServer->>BastionHost: Authentication successful
    BastionHost->>User: Secure connection established
"""

DEFAULT_DIAGRAM = """
graph TD
    A[Start] --> B{Is it a diagram?}
    B -->|Yes| C[Generate Diagram]
    B -->|No| D[Show Error]
    C --> E[Display Result]
    D --> E
"""


def simulate_diagram(text: str) -> str:
    lowered = text.lower()
    if "ssh" in lowered and "bastion" in lowered:
        return SSH_BASTION_DIAGRAM.strip()
    return DEFAULT_DIAGRAM.strip()
