"""
APPLICATION LAYER - Use Cases & Orchestration

This layer contains:
- commands/  → Write operations (CQRS): DM channels, friend requests
- queries/   → Read operations (CQRS): friend lists, DM inbox
- dto/       → Data Transfer Objects
- common/    → Shared interfaces, Result boundary, input guards

Rules:
- Depends on Domain layer only
- No HTTP/framework code here
- Handlers return Result and never raise
"""
