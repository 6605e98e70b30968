#
# Copyright (c), 2016-2025, SISSA (International School for Advanced Studies).
# All rights reserved.
# This file is distributed under the terms of the MIT License.
# See the file 'LICENSE' in the root directory of the present
# distribution, or http://opensource.org/licenses/MIT.
#
# @author Davide Brunato <brunato@sissa.it>
#
"""
This module contains namespace definitions for schema languages and binding customizations.
"""

###
# Namespace URIs of host schema languages
XSD_NAMESPACE = 'http://www.w3.org/2001/XMLSchema'
"URI of the XML Schema Definition namespace (xs|xsd)"

XML_NAMESPACE = 'http://www.w3.org/XML/1998/namespace'
"URI of the XML namespace (xml)"

DTD_NAMESPACE = ''
"DTD binding documents have no namespace"

###
# Namespace URIs of binding customizations
JAXB_NAMESPACE = 'http://java.sun.com/xml/ns/jaxb'
"URI of the standard binding customizations namespace (jaxb)"

XJC_EXTENSION_NAMESPACE = 'http://java.sun.com/xml/ns/jaxb/xjc'
"URI of the intrinsic vendor extension namespace (xjc), always supported"

SCHEMA_LANGUAGES = {
    'xsd': XSD_NAMESPACE,
    'dtd': DTD_NAMESPACE,
}
"Map of supported schema languages to their namespace URIs"
