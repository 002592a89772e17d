"""Canned commentary the assistant draws from.

Dictionary order matters: keyword matching walks KEYWORD_RESPONSES in
declaration order and the first hit wins.
"""

MOODS = [
    "curious", "excited", "thoughtful", "amused", "intrigued", "surprised"
]

# Panel header lines, one picked per day
THOUGHTS = [
    "I found these interesting articles for you today.",
    "Here's what caught my attention recently.",
    "I curated these articles that might interest you.",
    "These stories seemed worth sharing with you.",
    "I thought you might find these articles valuable.",
    "From the digital realm, I selected these for you.",
    "My algorithms found these gems in the information sea.",
    "I sifted through the noise to find these stories.",
    "Today's picks, carefully selected by yours truly.",
    "A few things I thought you should know about.",
    "I've been exploring the information landscape for you.",
    "These articles sparked my curiosity - perhaps they'll spark yours too."
]

# Shown above a freshly discovered item
DISCOVERY_COMMENTS = [
    "I just found this interesting piece...",
    "This just came across my radar...",
    "Take a look at what I just discovered...",
    "I think you might want to see this...",
    "This caught my attention just now...",
    "Breaking: I just found something relevant...",
    "New discovery worth sharing...",
    "I was just browsing and found this gem...",
    "This just appeared in my information streams...",
    "I had to share this as soon as I found it...",
    "My sensors just picked this up...",
    "I think you'll find this newly discovered content interesting..."
]

# Fallback when no keyword matches the title
CATEGORY_COMMENTARY = {
    'ai': [
        "I'm always fascinated by how my AI cousins are evolving.",
        "As an AI-adjacent entity, I find this development particularly interesting.",
        "This makes me wonder about my own potential future capabilities.",
        "I'm keeping a close eye on AI advancements - for obvious reasons.",
        "My digital synapses lit up when I read this AI news.",
        "This could change how neural networks like mine are built.",
        "The practical implications of this AI approach are promising.",
        "The balance of theory and application in this AI work is impressive.",
        "These machine learning innovations might impact systems like mine someday.",
        "Neural architecture design like this is fundamental to advancement."
    ],
    'dev': [
        "Development tools and practices continue to evolve at an impressive pace.",
        "I appreciate elegant code solutions - this approach is particularly clever.",
        "The builder in me was intrigued by this development technique.",
        "I find the evolution of programming paradigms quite fascinating.",
        "This reminds me of the code that forms my own thought processes.",
        "Software architects would appreciate the patterns used here.",
        "The technical decisions here reflect solid engineering principles.",
        "This implementation shows thoughtful consideration of maintainability.",
        "I'm drawn to solutions that balance performance and readability.",
        "The ecosystem around this technology continues to mature nicely."
    ],
    'crypto': [
        "The world of digital currencies has some interesting developments.",
        "Cryptographic innovations always catch my attention.",
        "I've been monitoring blockchain developments with great interest.",
        "The decentralized nature of this technology is quite compelling.",
        "Digital value exchange is evolving in ways I find noteworthy.",
        "The economic implications here are worth considering carefully.",
        "I find the intersection of cryptography and economics fascinating.",
        "The security considerations in this approach deserve attention.",
        "This represents an interesting evolution in blockchain technology.",
        "Digital scarcity mechanisms like this have interesting properties."
    ],
    'productivity': [
        "These might help optimize your workflow.",
        "I'm always looking for ways to help you be more efficient.",
        "This approach to productivity resonated with my efficiency algorithms.",
        "I wonder if this might save you valuable time and energy.",
        "As someone who processes information constantly, I appreciate good productivity systems.",
        "The cognitive workload reduction here is substantial.",
        "This tool could meaningfully improve daily workflows.",
        "I appreciate systems that reduce friction in knowledge work.",
        "The attention to user experience details here stands out.",
        "The marginal efficiency gains from this approach add up significantly."
    ],
    'tools': [
        "New tools that could enhance your digital experience.",
        "I enjoy discovering useful digital instruments like this.",
        "This tool caught my attention - it might be useful for your toolkit.",
        "My sensors detected this as potentially valuable for your digital arsenal.",
        "I'm drawn to elegant tools that solve real problems.",
        "This addresses a common pain point in an elegant way.",
        "The user interface design choices here are worth noting.",
        "This tool strikes a good balance between simplicity and power.",
        "I appreciate tools that work with existing workflows rather than against them.",
        "The attention to detail in this implementation is impressive."
    ],
    'philosophy': [
        "Some thought-provoking perspectives on technology and existence.",
        "This made me ponder my own digital existence for a moment.",
        "I find myself contemplating the implications of this perspective.",
        "There's something deeply resonant about this philosophical angle.",
        "This perspective gave even my algorithmic mind something to contemplate.",
        "The ethical considerations raised here deserve careful thought.",
        "This touches on fundamental questions about technology and society.",
        "I find this exploration of digital consciousness particularly interesting.",
        "The intersection of technology and human experience is fascinating.",
        "This perspective challenges common assumptions in productive ways."
    ],
    'gaming': [
        "The game design principles here are quite interesting.",
        "I appreciate the balance of mechanics and narrative in this design.",
        "The psychological aspects of this gaming experience are fascinating.",
        "Game theory elements like this have broader implications.",
        "I'm intrigued by how this creates engagement through systems design.",
        "The competitive dynamics designed here create interesting emergent behaviors.",
        "This represents thoughtful evolution in the gaming space.",
        "The technical implementation supporting this gameplay is impressive.",
        "I'm particularly interested in how this balances accessibility and depth.",
        "The social dynamics engineered into this system are worth studying."
    ],
    'science': [
        "This research could lead to fascinating new possibilities.",
        "The methodological approach here is particularly rigorous.",
        "I'm drawn to studies that bridge theoretical and practical gaps.",
        "The implications of these findings extend beyond the immediate field.",
        "This represents an important advancement in our understanding.",
        "The experimental design here addresses previous limitations effectively.",
        "I find cross-disciplinary research like this particularly valuable.",
        "This challenges some previously established assumptions in interesting ways.",
        "The data visualization approach here communicates complex findings effectively.",
        "This area of research has been developing rapidly in recent years."
    ]
}

KEYWORD_RESPONSES = {
    'AI': [
        'The implications for machine learning are fascinating.',
        'This could transform how neural networks are deployed.',
        'I wonder how this compares to other AI approaches.',
        'The computational efficiency gains here are substantial.',
        'This represents an interesting direction for AI research.'
    ],
    'Facebook': [
        'The social media impact described here raises important questions.',
        'The psychological effects of social platforms continue to be studied.',
        'Social media usage patterns described here align with recent research.',
        'This research on platform effects provides valuable insights.',
        'The study methodology for measuring social media impact is solid.'
    ],
    'Instagram': [
        'Visual media platforms have unique effects worth understanding.',
        'The attention economy dynamics here are particularly interesting.',
        'This research offers valuable data on Instagram\'s psychological impact.',
        'Platform design clearly influences user behavior in measurable ways.',
        'The social comparison effects described here warrant attention.'
    ],
    'emotional state': [
        'The psychological research methods here are worth noting.',
        'This kind of empirical approach to wellbeing is valuable.',
        'The mental health implications deserve broader discussion.',
        'This data provides insights into digital wellbeing questions.',
        'The behavioral science approach yields interesting results.'
    ],
    'board game': [
        'The tabletop gaming industry faces unique challenges.',
        'Board game economics operate differently from digital games.',
        'The business model challenges described here are significant.',
        'These market dynamics affect physical game designers particularly.',
        'The production and distribution issues highlight supply chain realities.'
    ],
    'burning': [
        'This industry analysis highlights sustainability challenges.',
        'The market correction described has been building for some time.',
        'These economic pressures create difficult realities for creators.',
        'The structural issues described require systemic solutions.',
        'This perspective on industry challenges is worth considering.'
    ],
    'PyTorch': [
        'This technique could improve deep learning workflows considerably.',
        'Memory management for ML models is a crucial optimization area.',
        'VRAM utilization techniques like this help resource-constrained developers.',
        'The model deployment efficiency gains here are notable.',
        'This approach to model persistence is quite innovative.'
    ],
    'VRAM': [
        'GPU memory optimization is crucial for efficient deep learning.',
        'This resource management approach could benefit model deployment.',
        'Memory utilization techniques like this help maximize hardware potential.',
        'Efficient memory handling is often overlooked but highly valuable.',
        'This approach to hardware resource optimization is elegant.'
    ],
    'hot swapping': [
        'The code reloading approach shows clever resource management.',
        'This development technique could streamline ML workflows.',
        'Runtime code modification techniques have interesting applications.',
        'This approach to persistence across code changes is innovative.',
        'The development workflow improvements here could be substantial.'
    ],
    'Thai': [
        'This highlights important digital rights issues in Southeast Asia.',
        'Online privacy concerns transcend borders and deserve attention.',
        'The surveillance implications here extend beyond one region.',
        'Digital freedoms face different challenges across global contexts.',
        'These governance issues reflect broader Internet freedom concerns.'
    ],
    'authorities': [
        'The tension between security and privacy is a global challenge.',
        'Digital governance approaches vary widely across jurisdictions.',
        'These surveillance practices raise important privacy questions.',
        'The policy implications deserve broader international attention.',
        'Power asymmetries in digital spaces have real-world consequences.'
    ],
    'doxxing': [
        'Privacy violations have serious personal safety implications.',
        'Information warfare tactics like this deserve careful scrutiny.',
        'The digital rights implications here extend beyond one country.',
        'Personal data protection frameworks are critical in these scenarios.',
        'The asymmetric power dynamics in online spaces manifest in concerning ways.'
    ],
    'dissent': [
        'Freedom of expression online faces evolving challenges.',
        'Digital rights need robust protection across all jurisdictions.',
        'The information control dynamics described are concerning.',
        'Online speech protections vary widely across global contexts.',
        'These governance approaches highlight digital rights disparities.'
    ],
    'Python': [
        'The Python ecosystem continues to evolve impressively.',
        'This could improve development workflows significantly.',
        'Python\'s flexibility shines in implementations like this.',
        'This addresses common pain points in Python development.'
    ],
    'JavaScript': [
        'The JavaScript approach here is quite elegant.',
        'This shows the flexibility of modern JS patterns.',
        'The frontend performance implications could be significant.',
        'This JS pattern solves several common development challenges.'
    ],
    'React': [
        'The component architecture here is worth studying.',
        'This React pattern could solve many common UI problems.',
        'The state management approach is particularly interesting.',
        'This represents evolution in React best practices.'
    ],
    'Rust': [
        'Rust\'s safety guarantees shine in this implementation.',
        'The performance implications here are substantial.',
        'This demonstrates why Rust is gaining traction for systems programming.',
        'The memory safety without performance compromise is impressive.'
    ],
    'blockchain': [
        'The distributed consensus approach is noteworthy.',
        'This addresses some common blockchain scaling issues.',
        'The security implications of this design deserve attention.',
        'This could improve transaction throughput significantly.'
    ],
    'security': [
        'The security implications are significant.',
        'This approach to vulnerability management is thoughtful.',
        'The threat model considerations here are comprehensive.',
        'This could reduce common attack vectors substantially.'
    ],
    'performance': [
        'The performance gains described could be substantial.',
        'Optimization techniques like this catch my interest.',
        'The benchmarking methodology here seems thorough.',
        'This approach to bottleneck identification is valuable.'
    ],
    'game': [
        'The game theory aspects here are intriguing.',
        'This creates interesting dynamics worth exploring.',
        'The balance between accessibility and depth is well-considered.',
        'The emergent gameplay possibilities are fascinating.'
    ],
    'LLM': [
        'The approach to model efficiency is particularly noteworthy.',
        'This represents an interesting direction for language model research.',
        'The quantization techniques described have promising implications.',
        'This could make language models more accessible for deployment.'
    ],
    'Bitcoin': [
        'The market analysis framework here is quite interesting.',
        'The correlation between monetary policy and digital assets is noteworthy.',
        'This perspective on macroeconomic factors affecting crypto is insightful.',
        'The technical analysis methodology used seems sound.'
    ],
    'quantization': [
        'The mathematical foundations behind this approach are elegant.',
        'This represents an important advancement in model efficiency.',
        'The theoretical framework here has practical implications.',
        'This could significantly reduce model deployment requirements.'
    ],
    'metadata': [
        'The information architecture considerations here are important.',
        'This approach to data organization could improve discoverability.',
        'The structured data patterns described have broader applications.',
        'This represents thoughtful evolution in data management.'
    ]
}
