"""
DOMAIN LAYER - Friends and DM channels

This layer contains:
- Entities: Business objects with identity (User, DMChannel, DMWrapper, Friend)
- Value Objects: Self-validating types (UserId, UserEmail, UserName, ProjectId, Token)
- Ports: Interfaces that infrastructure implements (repositories, observability)
- Exceptions: Domain-specific errors (ValidationError, NotFoundError, ConflictError)
- Result: Success/Failure envelope returned by ports and use cases

RULES:
1. NO framework imports (no FastAPI, Firestore, Pydantic, etc.)
   - Token parsing uses PyJWT's unverified decode, nothing else
2. NO I/O operations (no database, no HTTP, no file system)
3. Entities never mutate: transitions return new instances
4. This is where business rules live
"""
