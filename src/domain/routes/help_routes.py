from fastapi import APIRouter

router = APIRouter(tags=["Help"])

FAQS = [
    {
        "question": "How do I create a new user?",
        "answer": "Navigate to the 'User Management' section from the sidebar, then click "
        "the 'Create User' button. Fill in the required details in the form and submit.",
    },
    {
        "question": "How can I edit an existing user's information?",
        "answer": "In the 'User Management' list, find the user you wish to edit. Open the "
        "menu on their row and select 'Edit User'. Modify the details and save.",
    },
    {
        "question": "What do the different user statuses mean?",
        "answer": "'Active' means the user can log in and use the application. 'Disabled' "
        "means their access is revoked. An account that is locked or expired is also "
        "shown as 'Disabled'.",
    },
    {
        "question": "How do I reset my password?",
        "answer": "Go to your 'My Profile' page and open the 'Security' section to change "
        "your password. If you have forgotten it, use the 'Forgot Password' link on "
        "the login page.",
    },
    {
        "question": "What is Role Management?",
        "answer": "Role Management lets administrators define user roles (e.g. Admin, "
        "Editor, User) and assign them to users. Roles control what users can see and "
        "do within the application.",
    },
]

TERMS_OF_SERVICE = [
    {
        "heading": "1. Acceptance of Terms",
        "body": "By accessing and using User Hub (the \"Service\"), you accept and agree to "
        "be bound by the terms and provision of this agreement. If you do not agree to "
        "abide by them, please do not use this Service.",
    },
    {
        "heading": "2. Description of Service",
        "body": "Our Service provides user management capabilities. This description is "
        "subject to change and modification by us without notice.",
    },
    {
        "heading": "3. User Conduct",
        "body": "You are responsible for all activity that occurs under your account. You "
        "agree not to use the service for any illegal or unauthorized purpose.",
    },
    {
        "heading": "4. Termination",
        "body": "We may terminate or suspend access to our Service immediately, without "
        "prior notice or liability, for any reason whatsoever, including if you breach "
        "the Terms.",
    },
]

PRIVACY_POLICY = [
    {
        "heading": "1. Information We Collect",
        "body": "We collect information you provide directly to us, such as when you create "
        "an account (e.g. name, email address). We also collect information "
        "automatically when you use the Service (e.g. IP address, browser type, log data).",
    },
    {
        "heading": "2. How We Use Information",
        "body": "We use the information we collect to provide, maintain and improve our "
        "Service, and to protect User Hub and our users.",
    },
    {
        "heading": "3. Information Sharing",
        "body": "We do not share personal information outside of User Hub except with your "
        "consent, for external processing by trusted affiliates, or for legal reasons.",
    },
    {
        "heading": "4. Data Security",
        "body": "We work hard to protect User Hub and our users from unauthorized access to "
        "or unauthorized alteration, disclosure, or destruction of information we hold.",
    },
]


@router.get("/help")
async def help_page():
    """Help documentation: FAQs and links to the support forms."""
    return {
        "title": "Help Documentation",
        "faqs": FAQS,
        "support": {"contact": "/contact-support", "feedback": "/feedback"},
    }


@router.get("/terms-privacy")
async def terms_privacy_page():
    return {
        "title": "Terms of Service & Privacy Policy",
        "termsOfService": TERMS_OF_SERVICE,
        "privacyPolicy": PRIVACY_POLICY,
    }
