# schemas/services.py — Service identifier → CI display name catalog.
"""Embedded service-name catalog.

Mirrors the generated ``services.kt`` resource that labels the CI build
configurations.  Entries are kept in the order the generator emits them,
which is the order every rendered output reproduces.

Do not edit entries by hand: regenerate the resource upstream and re-sync
this literal (``service_names.py --source <file> --render kotlin`` will show
the diff-able form).
"""
from __future__ import annotations


RESOURCE_HEADER: tuple[str, ...] = (
    "Copyright (c) HashiCorp, Inc.",
    "SPDX-License-Identifier: MPL-2.0",
    "NOTE: this is Generated from the Service Definitions - manual changes will be lost",
    "      to re-generate this file, run 'make generate' in the root of the repository",
)

RESOURCE_VARIABLE = "services"


SERVICES: dict[str, str] = {
    "aadb2c": "AAD B2C",
    "apimanagement": "API Management",
    "advisor": "Advisor",
    "analysisservices": "Analysis Services",
    "appconfiguration": "App Configuration",
    "appservice": "AppService",
    "applicationinsights": "Application Insights",
    "arckubernetes": "ArcKubernetes",
    "attestation": "Attestation",
    "authorization": "Authorization",
    "automanage": "Automanage",
    "automation": "Automation",
    "azurestackhci": "Azure Stack HCI",
    "batch": "Batch",
    "billing": "Billing",
    "blueprints": "Blueprints",
    "bot": "Bot",
    "cdn": "CDN",
    "cognitive": "Cognitive Services",
    "communication": "Communication",
    "compute": "Compute",
    "confidentialledger": "Confidential Ledger",
    "connections": "Connections",
    "consumption": "Consumption",
    "containerapps": "Container Apps",
    "containers": "Container Services",
    "cosmos": "CosmosDB",
    "costmanagement": "Cost Management",
    "customproviders": "Custom Providers",
    "dns": "DNS",
    "dashboard": "Dashboard",
    "datafactory": "Data Factory",
    "datashare": "Data Share",
    "databricks": "DataBricks",
    "dataprotection": "DataProtection",
    "databasemigration": "Database Migration",
    "databoxedge": "Databox Edge",
    "datadog": "Datadog",
    "desktopvirtualization": "Desktop Virtualization",
    "devtestlabs": "Dev Test",
    "digitaltwins": "Digital Twins",
    "disks": "Disks",
    "domainservices": "DomainServices",
    "elastic": "Elastic",
    "eventgrid": "EventGrid",
    "eventhub": "EventHub",
    "firewall": "Firewall",
    "fluidrelay": "Fluid Relay",
    "frontdoor": "FrontDoor",
    "graphservices": "Graph Services",
    "hdinsight": "HDInsight",
    "hpccache": "HPC Cache",
    "hsm": "Hardware Security Module",
    "healthcare": "Health Care",
    "hybridcompute": "Hybrid Compute",
    "iotcentral": "IoT Central",
    "iothub": "IoT Hub",
    "keyvault": "KeyVault",
    "kusto": "Kusto",
    "labservice": "Lab Service",
    "legacy": "Legacy",
    "lighthouse": "Lighthouse",
    "loadbalancer": "Load Balancer",
    "loadtestservice": "LoadTestService",
    "loganalytics": "Log Analytics",
    "logic": "Logic",
    "logz": "Logz",
    "machinelearning": "Machine Learning",
    "maintenance": "Maintenance",
    "managedapplications": "Managed Applications",
    "managedidentity": "ManagedIdentity",
    "managementgroup": "Management Group",
    "maps": "Maps",
    "mariadb": "MariaDB",
    "media": "Media",
    "mssql": "Microsoft SQL Server / Azure SQL",
    "mssqlmanagedinstance": "Microsoft SQL Server Managed Instances",
    "mixedreality": "Mixed Reality",
    "mobilenetwork": "Mobile Network",
    "monitor": "Monitor",
    "mysql": "MySQL",
    "netapp": "NetApp",
    "network": "Network",
    "networkfunction": "Network Function",
    "newrelic": "New Relic",
    "nginx": "Nginx",
    "notificationhub": "Notification Hub",
    "orbital": "Orbital",
    "policy": "Policy",
    "portal": "Portal",
    "postgres": "PostgreSQL",
    "powerbi": "PowerBI",
    "privatedns": "Private DNS",
    "privatednsresolver": "Private DNS Resolver",
    "purview": "Purview",
    "recoveryservices": "Recovery Services",
    "redis": "Redis",
    "redisenterprise": "Redis Enterprise",
    "relay": "Relay",
    "resource": "Resources",
    "sql": "SQL",
    "search": "Search",
    "securitycenter": "Security Center",
    "sentinel": "Sentinel",
    "servicefabric": "Service Fabric",
    "servicefabricmanaged": "Service Fabric Managed Clusters",
    "servicebus": "ServiceBus",
    "serviceconnector": "ServiceConnector",
    "signalr": "SignalR",
    "springcloud": "Spring Cloud",
    "storage": "Storage",
    "storagemover": "Storage Mover",
    "streamanalytics": "Stream Analytics",
    "subscription": "Subscription",
    "synapse": "Synapse",
    "iottimeseriesinsights": "Time Series Insights",
    "trafficmanager": "Traffic Manager",
    "vmware": "VMware",
    "videoanalyzer": "Video Analyzer",
    "voiceservices": "Voice Services",
    "web": "Web",
}
