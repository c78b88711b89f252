"""Security – policy resolution, restricted views, and the secured catalog."""
from secure_catalog.security.catalog import SecureCatalog
from secure_catalog.security.composite import GroupPolicyReducer
from secure_catalog.security.decorator import ObjectDecorator
from secure_catalog.security.filtering import CollectionFilter, SecurityPredicate
from secure_catalog.security.limits import (
    AccessLimits,
    CatalogMode,
    CoverageAccessLimits,
    DataAccessLimits,
    LayerGroupAccessLimits,
    ResourceAccessManager,
    StyleAccessLimits,
    VectorAccessLimits,
    WMSAccessLimits,
    WorkspaceAccessLimits,
)
from secure_catalog.security.policy import (
    AccessLevel,
    Response,
    WrapperPolicy,
    most_restrictive,
    unauthorized_access,
)
from secure_catalog.security.resolver import PolicyResolver
from secure_catalog.security.settings import SecureCatalogSettings
from secure_catalog.security.unwrap import unwrap
from secure_catalog.security.views import (
    WRITE_OPERATIONS,
    MetadataInfo,
    ReadOnlyContent,
    ReadOnlyInfo,
    SecuredInfo,
    SecuredLayerGroup,
    secure,
)

__all__ = [
    "WRITE_OPERATIONS",
    "AccessLevel",
    "AccessLimits",
    "CatalogMode",
    "CollectionFilter",
    "CoverageAccessLimits",
    "DataAccessLimits",
    "GroupPolicyReducer",
    "LayerGroupAccessLimits",
    "MetadataInfo",
    "ObjectDecorator",
    "PolicyResolver",
    "ReadOnlyContent",
    "ReadOnlyInfo",
    "ResourceAccessManager",
    "Response",
    "SecureCatalog",
    "SecureCatalogSettings",
    "SecuredInfo",
    "SecuredLayerGroup",
    "SecurityPredicate",
    "StyleAccessLimits",
    "VectorAccessLimits",
    "WMSAccessLimits",
    "WorkspaceAccessLimits",
    "WrapperPolicy",
    "most_restrictive",
    "secure",
    "unauthorized_access",
    "unwrap",
]
