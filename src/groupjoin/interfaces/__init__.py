"""Interfaces (application boundary) for groupjoin.

Defines framework-free application contracts: ABCs and the errors they raise,
shared by the service layer and adapters. Business rules stay out of this
package.

Dependency rule: this package may import `groupjoin.domain` only. It may be
imported by `groupjoin.service_layer`, `groupjoin.adapters`, and
`groupjoin.bootstrap`.
"""
