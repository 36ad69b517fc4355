"""
CLAIMSO wallet passes - template customization and .pkpass signing.
"""

from claimso.passes.composer import PassComposer
from claimso.passes.credentials import SignerCredentials, SigningConfigurationError
from claimso.passes.models import PassBarcode, PassField, PassTemplate, SubjectProfile, replace_field
from claimso.passes.signer import PassSigner, PKPassSigner
from claimso.passes.template import build_pass_template

__all__ = [
    "PKPassSigner",
    "PassBarcode",
    "PassComposer",
    "PassField",
    "PassSigner",
    "PassTemplate",
    "SignerCredentials",
    "SigningConfigurationError",
    "SubjectProfile",
    "build_pass_template",
    "replace_field",
]
