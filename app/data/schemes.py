# Government scheme catalogue and eligibility configuration
# "conditions" must all hold for a farmer to qualify; "bonuses" raise the
# match score for schemes serving the named target group.

SCHEMES = {
    "schemes": [
        {
            "id": "pm-kisan",
            "title": {"en": "PM Kisan Samman Nidhi", "hi": "पीएम किसान सम्मान निधि"},
            "category": "financial",
            "description": {
                "en": "Direct income support scheme for small and marginal farmers",
                "hi": "छोटे और सीमांत किसानों के लिए प्रत्यक्ष आय सहायता योजना"
            },
            "benefits": {
                "en": "₹6,000 per year in three equal installments",
                "hi": "प्रति वर्ष ₹6,000 तीन समान किश्तों में"
            },
            "eligibility": {
                "en": [
                    "Small and marginal farmers",
                    "Land holding up to 2 hectares",
                    "Valid Aadhaar card linked to bank account",
                    "Not applicable for income tax payees"
                ],
                "hi": [
                    "छोटे और सीमांत किसान",
                    "2 हेक्टेयर तक की भूमि धारण",
                    "बैंक खाते से लिंक वैध आधार कार्ड",
                    "आयकर भुगतानकर्ताओं पर लागू नहीं"
                ]
            },
            "application_deadline": "Open throughout the year",
            "status": "active",
            "application_link": "https://pmkisan.gov.in/",
            "ministry": "Ministry of Agriculture & Farmers Welfare",
            "amount": "₹6,000 annually",
            "documents": ["Aadhaar Card", "Bank Account Details", "Land Records"],
            "priority": "high",
            "target_farmers": ["small", "marginal"],
            "conditions": [
                {
                    "attribute": "land_holding_category",
                    "op": "in",
                    "value": ["less-than-1-hectare", "1-2-hectares"],
                    "reason_if_fail": "Land holding must be up to 2 hectares"
                }
            ]
        },
        {
            "id": "pm-fby",
            "title": {"en": "Pradhan Mantri Fasal Bima Yojana", "hi": "प्रधानमंत्री फसल बीमा योजना"},
            "category": "insurance",
            "description": {
                "en": "Crop insurance scheme to protect farmers against crop losses",
                "hi": "फसल हानि के खिलाफ किसानों की रक्षा के लिए फसल बीमा योजना"
            },
            "benefits": {
                "en": "Insurance coverage for crop losses due to natural calamities",
                "hi": "प्राकृतिक आपदाओं के कारण फसल हानि के लिए बीमा कवर"
            },
            "eligibility": {
                "en": [
                    "All farmers including sharecroppers",
                    "Must have insurable interest in crops",
                    "Required for loanee farmers",
                    "Voluntary for non-loanee farmers"
                ],
                "hi": [
                    "सभी किसान जिनमें साझेदार किसान भी शामिल हैं",
                    "फसलों में बीमायोग्य हित होना चाहिए",
                    "ऋणदार किसानों के लिए अनिवार्य",
                    "गैर-ऋणदार किसानों के लिए स्वैच्छिक"
                ]
            },
            "application_deadline": "Varies by crop season",
            "status": "active",
            "application_link": "https://pmfby.gov.in/",
            "ministry": "Ministry of Agriculture & Farmers Welfare",
            "amount": "Up to 100% of crop cost",
            "documents": ["Land Records", "Aadhaar Card", "Bank Details", "Crop Details"],
            "priority": "high",
            "target_farmers": ["all"],
            "conditions": [
                {
                    "attribute": "land_holding_category",
                    "op": "!=",
                    "value": "no-land",
                    "reason_if_fail": "Farmers must hold cultivable land"
                }
            ]
        },
        {
            "id": "soil-health",
            "title": {"en": "Soil Health Card Scheme", "hi": "मृदा स्वास्थ्य कार्ड योजना"},
            "category": "sustainable",
            "description": {
                "en": "Provides soil health cards to farmers for balanced fertilizer use",
                "hi": "संतुलित उर्वरक उपयोग के लिए किसानों को मृदा स्वास्थ्य कार्ड प्रदान करता है"
            },
            "benefits": {
                "en": "Free soil testing and fertilizer recommendations",
                "hi": "मुफ्त मृदा परीक्षण और उर्वरक सिफारिशें"
            },
            "eligibility": {
                "en": ["All farmers", "Land ownership proof required", "Sample collection from agricultural land"],
                "hi": ["सभी किसान", "भूमि स्वामित्व प्रमाण आवश्यक", "कृषि भूमि से नमूना संग्रह"]
            },
            "application_deadline": "Throughout the year",
            "status": "active",
            "application_link": "https://soilhealth.gov.in/",
            "ministry": "Ministry of Agriculture & Farmers Welfare",
            "amount": "Free service",
            "documents": ["Land Records", "Identity Proof"],
            "priority": "medium",
            "target_farmers": ["all"],
            "conditions": [
                {
                    "attribute": "land_holding_category",
                    "op": "!=",
                    "value": "no-land",
                    "reason_if_fail": "Soil samples are collected from agricultural land"
                }
            ]
        },
        {
            "id": "pm-kusum",
            "title": {"en": "PM KUSUM Scheme", "hi": "पीएम कुसुम योजना"},
            "category": "technology",
            "description": {
                "en": "Promotes installation of solar pumps and grid-connected solar power plants",
                "hi": "सोलर पंप और ग्रिड-कनेक्टेड सोलर पावर प्लांट की स्थापना को बढ़ावा देता है"
            },
            "benefits": {
                "en": "Financial assistance for solar agricultural pumps",
                "hi": "सौर कृषि पंपों के लिए वित्तीय सहायता"
            },
            "eligibility": {
                "en": [
                    "Farmers with cultivable land",
                    "Priority to areas with poor electricity supply",
                    "Grid-connected solar power plants for farmers"
                ],
                "hi": [
                    "खेती योग्य भूमि वाले किसान",
                    "खराब बिजली आपूर्ति वाले क्षेत्रों को प्राथमिकता",
                    "किसानों के लिए ग्रिड-कनेक्टेड सौर पावर प्लांट"
                ]
            },
            "application_deadline": "2025-03-31",
            "status": "active",
            "application_link": "https://mnre.gov.in/kusum",
            "ministry": "Ministry of New and Renewable Energy",
            "amount": "Up to 30-90% subsidy",
            "documents": ["Land Records", "Aadhaar Card", "Bank Details", "Electricity Bill"],
            "priority": "medium",
            "target_farmers": ["all"],
            "conditions": [
                {
                    "attribute": "land_holding_category",
                    "op": "!=",
                    "value": "no-land",
                    "reason_if_fail": "Farmers must hold cultivable land"
                }
            ]
        }
    ],
    "bonuses": [
        {
            "attribute": "land_holding_category",
            "op": "==",
            "value": "less-than-1-hectare",
            "target": "small",
            "points": 30
        },
        {
            "attribute": "land_holding_category",
            "op": "==",
            "value": "1-2-hectares",
            "target": "marginal",
            "points": 25
        }
    ],
    "application_complexity": {
        "pm-kisan": "Low",
        "pm-fby": "Medium",
        "soil-health": "Low",
        "pm-kusum": "High"
    },
    "recommendations": {
        "pm-kisan": "PM Kisan offers immediate financial assistance",
        "pm-fby": "PMFBY provides comprehensive crop insurance",
        "soil-health": "Soil Health Card helps optimize fertilizer use",
        "pm-kusum": "PM KUSUM lowers irrigation energy costs with solar pumps"
    }
}
