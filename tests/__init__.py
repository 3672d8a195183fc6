"""
Trusted Application SDK Test Suite

The tests exercise the hypermedia resource graph against a mock transport:
- Discovery chain (discover → applications → application)
- Capability gating on advertised relations
- Staged initialization of embedded resources
- Error taxonomy and state preservation on failure
"""
